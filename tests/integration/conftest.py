"""
Fixtures for API tests: the real FastAPI app and providers, with in-memory
repositories in place of MongoDB.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from todo_api.di.base_container import BaseContainer
from todo_api.di.providers import AuthProvider, TaskProvider
from todo_api.domain.repositories.task_repository import TaskRepository
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.main import app


@pytest.fixture
def container(user_repo, task_repo):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(TaskRepository, task_repo)
    AuthProvider.register(container)
    TaskProvider.register(container)
    return container


@pytest.fixture
def client(container, mock_settings):
    """Create test client with the in-memory container and no database startup."""
    with patch("todo_api.api.v1.auth_controller.get_container", return_value=container), patch(
        "todo_api.api.v1.task_controller.get_container", return_value=container
    ), patch(
        "todo_api.api.v1.dependencies.get_container", return_value=container
    ), patch(
        "todo_api.main.initialize_database", new=AsyncMock()
    ), patch(
        "todo_api.main.close_database"
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def login(client):
    """Register (if needed) and log in a user, returning Authorization headers."""

    def _login(email: str = "alice@example.com", password: str = "secret123") -> dict:
        client.post("/api/register", json={"email": email, "password": password})
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
