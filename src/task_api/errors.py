from __future__ import annotations

from typing import Optional

from fastapi import status


class TaskError(Exception):
    """
    Base class for errors the registry reports to API clients.

    Subclasses fix the HTTP status code and the user-facing message; the
    application maps any TaskError to a JSON body of the form
    {"error": <message>}.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


# PUBLIC_INTERFACE
class ValidationError(TaskError):
    """Raised when a task is created without a title."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Title is required"


# PUBLIC_INTERFACE
class NotFoundError(TaskError):
    """Raised when an operation targets an id no task has."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Task not found"
