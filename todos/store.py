"""
In-memory task store shared by every request in the process.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Protocol

from todos.errors import StoreUnavailable, TaskConflict, TaskNotFound
from todos.schemas import Todo

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    """Operations the routes need from the task store."""

    def list(self) -> list[Todo]:
        ...

    def create(self, task: Todo) -> None:
        ...

    def update(self, task_id: int, task: Todo) -> None:
        ...

    def delete(self, task_id: int) -> None:
        ...


class InMemoryTaskStore:
    """
    Ordered list of todos guarded by a single lock.

    Each call holds the lock for its whole duration, so operations are
    atomic with respect to each other. Insertion order is preserved.
    """

    def __init__(self, lock_timeout_seconds: float = 5.0):
        self._tasks: list[Todo] = []
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout_seconds

    @contextmanager
    def _locked(self) -> Iterator[list[Todo]]:
        if not self._lock.acquire(timeout=self._lock_timeout):
            raise StoreUnavailable(
                f"store lock not acquired within {self._lock_timeout}s"
            )
        try:
            yield self._tasks
        finally:
            self._lock.release()

    def list(self) -> list[Todo]:
        with self._locked() as tasks:
            return [task.model_copy() for task in tasks]

    def create(self, task: Todo) -> None:
        with self._locked() as tasks:
            if any(existing.id == task.id for existing in tasks):
                logger.debug("    -> id already exists: %s", task.id)
                raise TaskConflict(task.id)
            tasks.append(task.model_copy())

    def update(self, task_id: int, task: Todo) -> None:
        """
        Replace the todo stored under ``task_id`` with ``task``.

        The replacement may carry a new id, but not one held by another todo.
        """
        with self._locked() as tasks:
            for index, existing in enumerate(tasks):
                if existing.id == task_id:
                    break
            else:
                logger.debug("    -> todo id not found!")
                raise TaskNotFound(task_id)

            if task.id != task_id and any(other.id == task.id for other in tasks):
                logger.debug("    -> id already exists: %s", task.id)
                raise TaskConflict(task.id)
            tasks[index] = task.model_copy()

    def delete(self, task_id: int) -> None:
        with self._locked() as tasks:
            remaining = [task for task in tasks if task.id != task_id]
            if len(remaining) == len(tasks):
                logger.debug("    -> todo id not found!")
                raise TaskNotFound(task_id)
            tasks[:] = remaining

    def reset(self) -> None:
        """Clear all stored todos (useful in tests)."""
        with self._locked() as tasks:
            tasks.clear()
