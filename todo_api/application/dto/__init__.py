from .auth_dto import UserCredentials, LoginRequest, LoginResponse, CurrentUser
from .user_dto import UserResponse, RegisterResponse
from .task_dto import (
    TaskCreateRequest,
    TaskUpdateRequest,
    TaskResponse,
    TaskResultResponse,
    MessageResponse,
)

__all__ = [
    "UserCredentials",
    "LoginRequest",
    "LoginResponse",
    "CurrentUser",
    "UserResponse",
    "RegisterResponse",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskResponse",
    "TaskResultResponse",
    "MessageResponse",
]
