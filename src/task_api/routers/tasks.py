from __future__ import annotations

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status

from ..errors import NotFoundError
from ..registry import TaskRegistry
from ..schemas import ErrorOut, MessageOut, TaskCreate, TaskOut

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)


def get_registry(request: Request) -> TaskRegistry:
    """
    Dependency returning the registry owned by the running application.
    """
    return request.app.state.registry


def _parse_id(raw: str) -> Optional[int]:
    """Parse a path segment as a task id; None unless it is a plain ASCII integer."""
    if not _ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TaskOut],
    summary="List Tasks",
    description="Return every task in creation order.",
    responses={
        200: {"description": "List retrieved successfully"},
    },
)
@router.get("/", response_model=List[TaskOut], include_in_schema=False)
def list_tasks(registry: TaskRegistry = Depends(get_registry)) -> List[TaskOut]:
    """
    List all tasks.
    """
    return [TaskOut(**t) for t in registry.list()]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a new task with completed=false and return it.",
    responses={
        201: {"description": "Task created successfully"},
        400: {"model": ErrorOut, "description": "Title is required"},
    },
)
@router.post("/", response_model=TaskOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_task(
    payload: Optional[TaskCreate] = None,
    registry: TaskRegistry = Depends(get_registry),
) -> TaskOut:
    """
    Create a new task. A missing body is treated the same as a missing title.
    """
    created = registry.create(payload.title if payload else None)
    return TaskOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{task_id}",
    response_model=TaskOut,
    summary="Toggle Task",
    description="Flip the completed flag of a task. Any request body is ignored.",
    responses={
        200: {"description": "Task updated"},
        404: {"model": ErrorOut, "description": "Task not found"},
    },
)
def toggle_task(task_id: str, registry: TaskRegistry = Depends(get_registry)) -> TaskOut:
    """
    Toggle completion. Non-numeric ids never match a task.
    """
    parsed = _parse_id(task_id)
    if parsed is None:
        raise NotFoundError()
    updated = registry.toggle_completion(parsed)
    return TaskOut(**updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id}",
    response_model=MessageOut,
    summary="Delete Task",
    description="Delete a task by ID. Always succeeds, whether or not a task matched.",
    responses={
        200: {"description": "Task deleted (or was already absent)"},
    },
)
def delete_task(task_id: str, registry: TaskRegistry = Depends(get_registry)) -> MessageOut:
    """
    Delete a task. Unknown and non-numeric ids are a no-op.
    """
    parsed = _parse_id(task_id)
    if parsed is not None:
        registry.delete(parsed)
    return MessageOut(message="Task deleted successfully")
