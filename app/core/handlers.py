# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.exceptions import BaseAPIException
from app.core.logging import logger


def error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details
            }
        },
    )


# 1. Custom errors raised by our own code
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


# 2. Pydantic validation errors (missing or malformed fields)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # "body.email" -> "email", "path.student_id" stays qualified
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        key = field or "body"
        # one field can fail several checks
        if key in details:
            details[key] = f"{details[key]}; {error['msg']}"
        else:
            details[key] = error["msg"]

    logger.info(f"Validation failed on {request.method} {request.url.path}: {details}")

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Input validation failed",
        details
    )


# 3. Standard HTTP errors (unknown route, method not allowed, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


# 4. Anything else (bugs, database outages)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please contact support.",
        str(exc) if settings.DEBUG else None
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
