"""
Exception hierarchy for the task tracker.

Raised by the validation layer, the auth service, repositories and use cases;
controllers translate them into HTTP responses.
"""

# Standard library imports
from typing import Any, Dict, List, Optional


class TodoApiError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or []


class ValidationError(TodoApiError):
    """Raised when a request payload fails validation. `details` lists field errors."""
    pass


class AuthError(TodoApiError):
    """Raised for bad credentials or a missing, malformed or tampered token."""
    pass


class EmailAlreadyExistsError(TodoApiError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class NotFoundError(TodoApiError):
    """Raised when a task does not exist or is not owned by the caller."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class UnexpectedError(TodoApiError):
    """Raised when the persistence layer fails."""
    pass
