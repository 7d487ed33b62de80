"""
Organizer API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from organizer.main import app
from organizer.auth.dependencies import get_user_repository
from organizer.auth.repository import InMemoryUserRepository
from organizer.auth.service import AuthService
from organizer.comments.repository import InMemoryCommentRepository
from organizer.comments.router import get_comment_repository
from organizer.database import get_database
from organizer.groups.dependencies import get_group_repository
from organizer.groups.repository import InMemoryGroupRepository
from organizer.tasks.repository import InMemoryTaskRepository
from organizer.tasks.router import get_task_repository


@pytest.fixture
def user_repository():
    """Provide a fresh in-memory user repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    return InMemoryTaskRepository()


@pytest.fixture
def group_repository():
    return InMemoryGroupRepository()


@pytest.fixture
def comment_repository():
    return InMemoryCommentRepository()


@pytest.fixture
def auth_service(user_repository, group_repository):
    return AuthService(user_repository, group_repository)


@pytest.fixture
def client(user_repository, task_repository, group_repository, comment_repository):
    """Create test client with in-memory repositories."""

    async def override_get_user_repository():
        return user_repository

    async def override_get_task_repository():
        return task_repository

    async def override_get_group_repository():
        return group_repository

    async def override_get_comment_repository():
        return comment_repository

    async def override_get_database():
        # Never reached once every repository is overridden
        return MagicMock()

    app.dependency_overrides[get_user_repository] = override_get_user_repository
    app.dependency_overrides[get_task_repository] = override_get_task_repository
    app.dependency_overrides[get_group_repository] = override_get_group_repository
    app.dependency_overrides[get_comment_repository] = override_get_comment_repository
    app.dependency_overrides[get_database] = override_get_database

    yield TestClient(app)
    # Clean up override after test
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Create a test account and return its credentials plus ID."""
    credentials = {"username": "testuser", "password": "testpassword123"}
    response = client.post("/user/create", json=credentials)
    return {**credentials, "id": response.json()["id"]}


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post(
        "/authenticate",
        json={"username": registered_user["username"], "password": registered_user["password"]},
    )
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_user(client):
    """Create a second account and return its credentials, ID and headers."""
    credentials = {"username": "seconduser", "password": "secondpassword123"}
    created = client.post("/user/create", json=credentials).json()
    return {
        **credentials,
        "id": created["id"],
        "headers": {"Authorization": f"Bearer {created['token']}"},
    }
