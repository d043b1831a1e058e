from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    The title is optional at the schema level so that a missing or empty
    title reaches the registry, which answers with "Title is required".
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Title of the task; must be non-empty")


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Schema returned by the API for a task.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "completed": False,
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the task")
    title: str = Field(..., description="Title of the task")
    completed: bool = Field(..., description="Completion status flag")


# PUBLIC_INTERFACE
class ErrorOut(BaseModel):
    """Error body for 400/404 responses."""

    error: str = Field(..., description="Human readable error message")


# PUBLIC_INTERFACE
class MessageOut(BaseModel):
    """Confirmation body for operations that return no resource."""

    message: str = Field(..., description="Human readable confirmation")
