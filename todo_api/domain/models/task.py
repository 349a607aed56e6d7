# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    """Lifecycle of a task"""
    TO_DO = "to_do"
    IN_PROGRESS = "in_progress"
    DONE = "done"


TASK_NAME_MIN_LENGTH = 3
TASK_NAME_MAX_LENGTH = 20


@dataclass
class Task:
    """
    Pure domain model for Task entity.

    A to-do item owned by exactly one user. `created_at` is assigned once when
    the task is first persisted and never changes afterwards.
    """
    id: Optional[str]
    user_id: str
    name: str
    status: TaskStatus = TaskStatus.TO_DO
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Owner user ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Task name is required")
        self.status = TaskStatus(self.status)
