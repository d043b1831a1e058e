from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TaskEntity(TypedDict):
    """
    A task record as held by the in-memory registry.

    Fields:
    - id: Unique integer identifier, immutable after creation
    - title: Non-empty title, stored exactly as submitted
    - completed: Boolean completion flag, False on creation
    """

    id: int
    title: str
    completed: bool
