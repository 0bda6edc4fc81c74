"""
Domain errors raised by the store, body validation and the upstream proxy.
"""

from __future__ import annotations


class TodosError(Exception):
    """Base class for all service errors."""


class TaskConflict(TodosError):
    def __init__(self, task_id: int):
        super().__init__(f"todo id already exists: {task_id}")
        self.task_id = task_id


class TaskNotFound(TodosError):
    def __init__(self, task_id: int):
        super().__init__(f"todo id not found: {task_id}")
        self.task_id = task_id


class StoreUnavailable(TodosError):
    """The store lock could not be acquired in time."""


class InvalidBody(TodosError):
    """Request body was too large or failed to parse."""


class UpstreamError(TodosError):
    """The outbound posts request failed at transport or decode."""
