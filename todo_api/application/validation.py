"""
Validation layer for incoming request payloads.

Each validator takes the decoded JSON body, checks it against a pydantic
model and either returns the parsed DTO or raises ValidationError carrying
one {message, path, type} entry per failing field.
"""

# Standard library imports
from typing import Any, Dict, List, Type, TypeVar

# External package imports
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ..domain.exceptions import ValidationError
from .dto.auth_dto import UserCredentials
from .dto.task_dto import TaskCreateRequest, TaskUpdateRequest


ModelT = TypeVar("ModelT", bound=BaseModel)


def format_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe {message, path, type} entries."""
    return [
        {
            "message": error.get("msg", "Invalid value"),
            "path": [str(part) for part in error.get("loc", ())],
            "type": error.get("type", "value_error"),
        }
        for error in errors
    ]


def _validate(model: Type[ModelT], payload: Any) -> ModelT:
    if not isinstance(payload, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            details=[{"message": "Request body must be a JSON object", "path": [], "type": "object_type"}],
        )
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exception:
        details = format_errors(exception.errors())
        raise ValidationError(f"Invalid {model.__name__}", details=details)


def validate_user(payload: Any) -> UserCredentials:
    """Require a plausible email and a password of at least 6 characters."""
    return _validate(UserCredentials, payload)


def validate_task(payload: Any) -> TaskCreateRequest:
    """Require a 3-20 character name; status defaults to to_do."""
    return _validate(TaskCreateRequest, payload)


def validate_task_update(payload: Any) -> TaskUpdateRequest:
    """Same rules as validate_task, but every field is optional."""
    return _validate(TaskUpdateRequest, payload)
