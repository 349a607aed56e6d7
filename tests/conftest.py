"""
Shared pytest fixtures for todo_api tests.
"""
import os
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from todo_api.domain.exceptions import EmailAlreadyExistsError
from todo_api.domain.models.task import Task
from todo_api.domain.models.user import User
from todo_api.domain.repositories.task_repository import TaskRepository
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.utils.datetime_utils import utc_now


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_todo_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 0
    mock.bcrypt_rounds = 4
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("todo_api.core.config.get_settings", return_value=mock), patch(
        "todo_api.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_task_repo():
    """Mock TaskRepository with async methods."""
    return AsyncMock(spec=TaskRepository)


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository mirroring the Mongo implementation's contract"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def save(self, user: User) -> User:
        if await self.find_by_email(user.email) is not None:
            raise EmailAlreadyExistsError(user.email)
        saved = User(id=str(ObjectId()), email=user.email, hashed_password=user.hashed_password)
        self.users[saved.id] = saved
        return saved


class InMemoryTaskRepository(TaskRepository):
    """Dict-backed TaskRepository; lookups are scoped by owner like the Mongo one"""

    def __init__(self) -> None:
        self.tasks: Dict[str, Task] = {}

    def _owned(self, task_id: str, user_id: str) -> Optional[Task]:
        task = self.tasks.get(task_id)
        if task is None or task.user_id != user_id:
            return None
        return task

    async def find_by_owner(self, user_id: str) -> List[Task]:
        return [task for task in self.tasks.values() if task.user_id == user_id]

    async def find_by_id(self, task_id: str, user_id: str) -> Optional[Task]:
        return self._owned(task_id, user_id)

    async def create(self, task: Task) -> Task:
        saved = Task(
            id=str(ObjectId()),
            user_id=task.user_id,
            name=task.name,
            status=task.status,
            created_at=utc_now(),
        )
        self.tasks[saved.id] = saved
        return saved

    async def update(self, task_id: str, user_id: str, changes: Dict[str, Any]) -> Optional[Task]:
        task = self._owned(task_id, user_id)
        if task is None:
            return None
        for key in ("name", "status"):
            if key in changes:
                setattr(task, key, changes[key])
        task.__post_init__()
        return task

    async def delete(self, task_id: str, user_id: str) -> Optional[Task]:
        task = self._owned(task_id, user_id)
        if task is None:
            return None
        return self.tasks.pop(task_id)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()
