from __future__ import annotations

import logging
from threading import RLock
from typing import List, Optional

from .errors import NotFoundError, ValidationError
from .ids import CounterIdAllocator, IdAllocator, make_allocator
from .models import TaskEntity
from .settings import Settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskRegistry:
    """
    Thread-safe in-memory owner of all tasks for the process lifetime.

    Tasks are kept in insertion order. Every operation runs under one lock,
    and callers only ever receive copies of the stored records.
    """

    def __init__(self, allocator: Optional[IdAllocator] = None) -> None:
        self._lock = RLock()
        self._items: List[TaskEntity] = []
        self._allocator = allocator or CounterIdAllocator()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _find(self, task_id: int) -> Optional[TaskEntity]:
        for item in self._items:
            if item["id"] == task_id:
                return item
        return None

    def list(self) -> List[TaskEntity]:
        """Return all tasks in creation order."""
        with self._lock:
            return [t.copy() for t in self._items]

    def create(self, title: Optional[str]) -> TaskEntity:
        """
        Append a new, not yet completed task.

        Raises:
            ValidationError: if title is None or empty.
        """
        if not title:
            logger.info("Rejected task without a title")
            raise ValidationError()
        with self._lock:
            entity: TaskEntity = {
                "id": self._allocator.allocate(),
                "title": title,
                "completed": False,
            }
            self._items.append(entity)
            logger.debug("Created task %s", entity["id"])
            return entity.copy()

    def toggle_completion(self, task_id: int) -> TaskEntity:
        """
        Flip the completed flag of a task and return the updated task.

        Raises:
            NotFoundError: if no task has this id.
        """
        with self._lock:
            item = self._find(task_id)
            if item is None:
                logger.info("Task %s not found for toggle", task_id)
                raise NotFoundError()
            item["completed"] = not item["completed"]
            logger.debug("Task %s completed=%s", task_id, item["completed"])
            return item.copy()

    def delete(self, task_id: int) -> int:
        """Remove the task with this id, if any. Return the number removed (0 or 1)."""
        with self._lock:
            kept = [t for t in self._items if t["id"] != task_id]
            removed = len(self._items) - len(kept)
            self._items = kept
        logger.debug("Deleted %d task(s) with id %s", removed, task_id)
        return removed


# PUBLIC_INTERFACE
def build_registry(settings: Settings) -> TaskRegistry:
    """Return an empty registry using the id strategy configured in settings."""
    return TaskRegistry(make_allocator(settings.id_strategy))
