# Standard library imports
import logging

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ...dto.task_dto import TaskCreateRequest, TaskResponse
from .mapping import task_to_response

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Use case for creating a new task"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, request: TaskCreateRequest, user_id: str) -> TaskResponse:
        """
        Create a new task owned by user_id

        Args:
            request: Validated task creation request
            user_id: ID of the user creating the task

        Returns:
            TaskResponse with the server-assigned id and created_at
        """
        new_task = Task(
            id=None,
            user_id=user_id,
            name=request.name,
            status=request.status,
        )

        saved_task = await self.task_repository.create(new_task)
        logger.info(f"Created task {saved_task.id} for user {user_id}")

        return task_to_response(saved_task)
