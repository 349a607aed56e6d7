# Standard library imports
import logging

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.exceptions import NotFoundError
from ...dto.task_dto import TaskResponse
from .mapping import task_to_response

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Use case for deleting a task owned by the caller"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, task_id: str, user_id: str) -> TaskResponse:
        """
        Delete a task and return the removed record

        Raises:
            NotFoundError: If the task does not exist or belongs to another user
        """
        task = await self.task_repository.delete(task_id, user_id)
        if task is None:
            raise NotFoundError("Task", task_id)

        logger.info(f"Deleted task {task_id} for user {user_id}")
        return task_to_response(task)
