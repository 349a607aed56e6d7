from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.task import Task


class TaskRepository(ABC):
    """
    Repository interface - defines contract for task data access.

    Every lookup is scoped to an owner: a task belonging to another user is
    indistinguishable from a missing one.
    """

    @abstractmethod
    async def find_by_owner(self, user_id: str) -> List[Task]:
        """Find all tasks owned by a user"""
        pass

    @abstractmethod
    async def find_by_id(self, task_id: str, user_id: str) -> Optional[Task]:
        """Find a task by ID among the tasks owned by user_id"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Insert a new task and return it with id and created_at set"""
        pass

    @abstractmethod
    async def update(self, task_id: str, user_id: str, changes: Dict[str, Any]) -> Optional[Task]:
        """Apply changes to an owned task; None if it does not exist"""
        pass

    @abstractmethod
    async def delete(self, task_id: str, user_id: str) -> Optional[Task]:
        """Remove an owned task and return it; None if it does not exist"""
        pass
