from typing import TYPE_CHECKING
from ...domain.repositories.task_repository import TaskRepository
from ...application.use_cases.task.list_tasks import ListTasksUseCase
from ...application.use_cases.task.create_task import CreateTaskUseCase
from ...application.use_cases.task.get_task import GetTaskUseCase
from ...application.use_cases.task.update_task import UpdateTaskUseCase
from ...application.use_cases.task.delete_task import DeleteTaskUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TaskProvider:
    """Task use case provider - registers all task-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all task use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            ListTasksUseCase,
            CreateTaskUseCase,
            GetTaskUseCase,
            UpdateTaskUseCase,
            DeleteTaskUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    task_repository=container.get(TaskRepository)
                )
            )
