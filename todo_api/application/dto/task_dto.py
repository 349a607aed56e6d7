# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from ...domain.models.task import TaskStatus, TASK_NAME_MIN_LENGTH, TASK_NAME_MAX_LENGTH


class TaskCreateRequest(BaseModel):
    """DTO for task creation request"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=TASK_NAME_MIN_LENGTH, max_length=TASK_NAME_MAX_LENGTH)
    status: TaskStatus = TaskStatus.TO_DO


class TaskUpdateRequest(BaseModel):
    """DTO for partial task update; only fields that were sent are applied"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(
        default=None,
        min_length=TASK_NAME_MIN_LENGTH,
        max_length=TASK_NAME_MAX_LENGTH,
    )
    status: Optional[TaskStatus] = None

    @field_validator("name", "status", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class TaskResponse(BaseModel):
    """DTO for task response"""
    id: str
    name: str
    status: TaskStatus
    created_at: Optional[datetime] = None
    user_id: str


class TaskResultResponse(BaseModel):
    """Envelope used by the task endpoints"""
    message: Optional[str] = None
    result: TaskResponse


class MessageResponse(BaseModel):
    """Bare message body, e.g. {"message": "Not found"}"""
    message: str
