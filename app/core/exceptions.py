from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the API.
    Keeps the error payload returned to clients in one format.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )


class StudentNotFoundException(NotFoundException):
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(message=f"Student not found with id {student_id}")
