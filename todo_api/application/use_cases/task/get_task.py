# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.exceptions import NotFoundError
from ...dto.task_dto import TaskResponse
from .mapping import task_to_response


class GetTaskUseCase:
    """Use case for getting a task by ID"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, task_id: str, user_id: str) -> TaskResponse:
        """
        Get a task by ID

        Raises:
            NotFoundError: If the task does not exist or belongs to another user
        """
        task = await self.task_repository.find_by_id(task_id, user_id)
        if task is None:
            raise NotFoundError("Task", task_id)

        return task_to_response(task)
