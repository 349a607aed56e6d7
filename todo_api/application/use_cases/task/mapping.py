from ....domain.models.task import Task
from ...dto.task_dto import TaskResponse


def task_to_response(task: Task) -> TaskResponse:
    """Convert a Task domain model to its response DTO"""
    return TaskResponse(
        id=task.id or "",
        name=task.name,
        status=task.status,
        created_at=task.created_at,
        user_id=task.user_id,
    )
