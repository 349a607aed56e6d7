from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.task_repository import TaskRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_task_repository import MongoTaskRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            TaskRepository,
            MongoTaskRepository(task_collection=container.get("task_collection"))
        )
