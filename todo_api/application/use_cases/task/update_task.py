# Standard library imports
import logging

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.exceptions import NotFoundError
from ....domain.constants import TaskFields
from ...dto.task_dto import TaskUpdateRequest, TaskResponse
from .mapping import task_to_response

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for updating a task owned by the caller"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(
        self,
        task_id: str,
        request: TaskUpdateRequest,
        user_id: str,
    ) -> TaskResponse:
        """
        Merge the fields present in the request into the stored task

        Args:
            task_id: ID of the task to update
            request: Validated partial update
            user_id: ID of the authenticated user

        Returns:
            TaskResponse with the updated task

        Raises:
            NotFoundError: If the task does not exist or belongs to another user
        """
        changes = request.model_dump(exclude_unset=True)
        if TaskFields.STATUS in changes:
            changes[TaskFields.STATUS] = changes[TaskFields.STATUS].value

        if not changes:
            # Nothing to merge, but a missing task must still be reported
            task = await self.task_repository.find_by_id(task_id, user_id)
        else:
            task = await self.task_repository.update(task_id, user_id, changes)

        if task is None:
            raise NotFoundError("Task", task_id)

        logger.info(f"Updated task {task_id} for user {user_id}: {sorted(changes)}")
        return task_to_response(task)
