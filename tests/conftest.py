"""
Shared fixtures: a fresh in-memory store per test, injected into the app
through ``dependency_overrides``, plus helpers that open sessions per role.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.dependencies import get_storage
from app.core.init import initialize_application
from app.storage.memory import MemStorage
from main import app


@pytest.fixture
def storage():
    storage = MemStorage()
    initialize_application(storage)
    return storage


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Register a user and return ``(user, headers)``; the cookie jar stays empty."""

    def _register(username: str, role: str = "student", password: str = "secret123"):
        response = client.post(
            "/api/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
                "first_name": username.title(),
                "role": role,
            },
        )
        assert response.status_code == 201, response.text
        client.cookies.clear()
        body = response.json()
        return body["user"], bearer(body["access_token"])

    return _register


@pytest.fixture
def admin(client):
    response = client.post(
        "/api/login",
        json={
            "username": settings.admin_default_username,
            "password": settings.admin_default_password,
        },
    )
    assert response.status_code == 200, response.text
    client.cookies.clear()
    body = response.json()
    return body["user"], bearer(body["access_token"])


@pytest.fixture
def instructor(register):
    return register("teacher", role="instructor")


@pytest.fixture
def other_instructor(register):
    return register("rival", role="instructor")


@pytest.fixture
def student(register):
    return register("learner")


@pytest.fixture
def category_id(storage):
    return storage.categories.find(slug="programming").id


@pytest.fixture
def make_course(client, category_id):
    """Create a course through the API as the given caller."""

    def _make_course(headers: dict, **overrides):
        payload = {
            "title": "Python for Beginners",
            "description": "Learn Python from scratch",
            "price": 49.0,
            "level": "beginner",
            "category_id": category_id,
        }
        payload.update(overrides)
        response = client.post("/api/courses", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_course


@pytest.fixture
def published_course(client, admin, instructor, make_course):
    """A course submitted by ``instructor`` and approved by ``admin``."""
    course = make_course(instructor[1], status="pending")
    response = client.post(
        f"/api/admin/courses/{course['id']}/approve", headers=admin[1]
    )
    assert response.status_code == 200, response.text
    return response.json()
