"""
Tests for application-level routes and error handlers.
"""

import asyncio
import json

from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from starlette.requests import Request

from app.api.deps import get_student_service
from app.core.config import settings
from app.core.handlers import validation_exception_handler
from app.main import app


class TestRootRoutes:
    """Test welcome and health endpoints"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["docs"] == "/docs"
        assert data["version"] == settings.APP_VERSION

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestErrorHandlers:
    """Test the error envelope for non-domain failures"""

    def test_unknown_route(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "HTTP_ERROR"

    def test_method_not_allowed(self, client):
        response = client.patch("/api/students/1", json={})

        assert response.status_code == 405
        assert response.json()["error"]["code"] == "HTTP_ERROR"

    def test_unhandled_error_returns_500(self, db_session):
        class BrokenService:
            def list(self):
                raise RuntimeError("database exploded")

        app.dependency_overrides[get_student_service] = lambda: BrokenService()
        try:
            with TestClient(app, raise_server_exceptions=False) as test_client:
                response = test_client.get("/api/students")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_SERVER_ERROR"
        assert error["details"] is None


class TestValidationDetails:
    """Test how validation messages are collected per field"""

    def test_all_messages_for_a_field_are_kept(self):
        request = Request({
            "type": "http",
            "method": "POST",
            "path": "/api/students",
            "headers": [],
            "query_string": b"",
        })
        exc = RequestValidationError([
            {"loc": ("body", "age"), "msg": "first problem", "type": "value_error"},
            {"loc": ("body", "age"), "msg": "second problem", "type": "value_error"},
            {"loc": ("body", "email"), "msg": "bad email", "type": "value_error"},
        ])

        response = asyncio.run(validation_exception_handler(request, exc))

        assert response.status_code == 400
        details = json.loads(response.body)["error"]["details"]
        assert details["age"] == "first problem; second problem"
        assert details["email"] == "bad email"
