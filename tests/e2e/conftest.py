"""Fixtures for HTTP tests."""

import pytest
from fastapi.testclient import TestClient

from blogsphere.config import Settings
from blogsphere.domain.service import JWTService
from blogsphere.interface.api.app import create_app
from tests.di import build_http_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    app_instance = create_app(build_http_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def jwt_service() -> JWTService:
    """JWT service using the same settings as the app under test."""
    return JWTService(Settings().auth)


@pytest.fixture
def register(client, jwt_service):
    """Register a user and return (user_id, auth cookies)."""

    def _register(fullname: str, email: str) -> tuple[str, dict[str, str]]:
        response = client.post("/users", json={"fullname": fullname, "email": email})
        assert response.status_code == 201
        user = response.json()
        token = jwt_service.create_token(user["user_id"], user["username"])
        return user["user_id"], {"auth_token": token}

    return _register


@pytest.fixture
def published_blog(client, register):
    """A published blog and its author's cookies."""
    author_id, cookies = register("Ada Author", "ada@example.com")
    response = client.post(
        "/blogs",
        json={
            "title": "Threads all the way down",
            "description": "On nested comments",
            "content": {"blocks": [{"type": "paragraph", "data": {"text": "Hi"}}]},
            "tags": ["design"],
        },
        cookies=cookies,
    )
    assert response.status_code == 201
    return response.json(), cookies
