# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ...dto.task_dto import TaskResponse
from .mapping import task_to_response


class ListTasksUseCase:
    """Use case for listing all tasks for a user"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, user_id: str) -> List[TaskResponse]:
        """
        List all tasks owned by a user

        Args:
            user_id: ID of the authenticated user

        Returns:
            List of TaskResponse objects (empty if the user has none)
        """
        tasks = await self.task_repository.find_by_owner(user_id)
        return [task_to_response(task) for task in tasks]
