from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .task import (
    ListTasksUseCase,
    CreateTaskUseCase,
    GetTaskUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ListTasksUseCase",
    "CreateTaskUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
