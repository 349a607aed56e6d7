# Standard library imports
import logging
from typing import Any, List

# External package imports
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.auth_dto import CurrentUser
from ...application.dto.task_dto import TaskResponse, TaskResultResponse, MessageResponse
from ...application.use_cases.task.list_tasks import ListTasksUseCase
from ...application.use_cases.task.create_task import CreateTaskUseCase
from ...application.use_cases.task.get_task import GetTaskUseCase
from ...application.use_cases.task.update_task import UpdateTaskUseCase
from ...application.use_cases.task.delete_task import DeleteTaskUseCase
from ...application.validation import validate_task, validate_task_update
from ...domain.exceptions import NotFoundError, UnexpectedError, ValidationError
from ...di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=MessageResponse(message="Not found").model_dump(),
    )


def _validation_failed(exception: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exception.details},
    )


def _unexpected(action: str, exception: UnexpectedError) -> JSONResponse:
    logger.error(f"Failed to {action}: {exception.message}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content="Error",
    )


@router.get("/tasks", response_model=List[TaskResponse])
async def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
) -> Any:
    """
    List all tasks for the current user

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        List of TaskResponse objects
    """
    container = get_container()
    list_tasks_use_case = container.get(ListTasksUseCase)

    try:
        return await list_tasks_use_case.execute(user_id=current_user.id)
    except UnexpectedError as exception:
        return _unexpected("list tasks", exception)


@router.post("/tasks", response_model=TaskResultResponse, response_model_exclude_none=True)
async def create_task(
    payload: Any = Body(default=None),
    current_user: CurrentUser = Depends(get_current_user),
) -> Any:
    """
    Create a new task owned by the current user

    Args:
        payload: JSON body with name and optional status
        current_user: Current authenticated user (from dependency)

    Returns:
        TaskResultResponse with the created task
    """
    try:
        request = validate_task(payload)
    except ValidationError as exception:
        return _validation_failed(exception)

    container = get_container()
    create_task_use_case = container.get(CreateTaskUseCase)

    try:
        task = await create_task_use_case.execute(request=request, user_id=current_user.id)
        return TaskResultResponse(message="Successful!", result=task)
    except UnexpectedError as exception:
        return _unexpected("create task", exception)


@router.get(
    "/tasks/{task_id}",
    response_model=TaskResultResponse,
    response_model_exclude_none=True,
)
async def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> Any:
    """
    Get a task by ID

    A missing task and a task owned by someone else both yield
    200 {"message": "Not found"}.
    """
    container = get_container()
    get_task_use_case = container.get(GetTaskUseCase)

    try:
        task = await get_task_use_case.execute(task_id=task_id, user_id=current_user.id)
        return TaskResultResponse(result=task)
    except NotFoundError:
        return _not_found()
    except UnexpectedError as exception:
        return _unexpected("get task", exception)


@router.put(
    "/tasks/{task_id}",
    response_model=TaskResultResponse,
    response_model_exclude_none=True,
)
async def update_task(
    task_id: str,
    payload: Any = Body(default=None),
    current_user: CurrentUser = Depends(get_current_user),
) -> Any:
    """
    Update name and/or status of a task owned by the current user

    Args:
        task_id: ID of the task
        payload: JSON body with the fields to change
        current_user: Current authenticated user (from dependency)

    Returns:
        TaskResultResponse with the updated task, or the "Not found" message
    """
    try:
        request = validate_task_update(payload)
    except ValidationError as exception:
        return _validation_failed(exception)

    container = get_container()
    update_task_use_case = container.get(UpdateTaskUseCase)

    try:
        task = await update_task_use_case.execute(
            task_id=task_id,
            request=request,
            user_id=current_user.id,
        )
        return TaskResultResponse(message="Update successful!", result=task)
    except NotFoundError:
        return _not_found()
    except UnexpectedError as exception:
        return _unexpected("update task", exception)


@router.delete(
    "/tasks/{task_id}",
    response_model=TaskResultResponse,
    response_model_exclude_none=True,
)
async def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> Any:
    """
    Delete a task owned by the current user and return the removed record
    """
    container = get_container()
    delete_task_use_case = container.get(DeleteTaskUseCase)

    try:
        task = await delete_task_use_case.execute(task_id=task_id, user_id=current_user.id)
        return TaskResultResponse(message="Delete successful!", result=task)
    except NotFoundError:
        return _not_found()
    except UnexpectedError as exception:
        return _unexpected("delete task", exception)
