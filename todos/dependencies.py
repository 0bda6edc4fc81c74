"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import threading

from todos.config import Settings, get_settings
from todos.store import InMemoryTaskStore

_task_store: InMemoryTaskStore | None = None
_task_store_lock = threading.Lock()


def get_task_store() -> InMemoryTaskStore:
    """
    Return the process-wide store so todos persist across requests.

    Sync dependencies run in the worker pool, so first use is guarded.
    """
    global _task_store
    if _task_store:
        return _task_store

    with _task_store_lock:
        if _task_store is None:
            settings = get_settings()
            _task_store = InMemoryTaskStore(
                lock_timeout_seconds=settings.store_lock_timeout_seconds
            )
    return _task_store


def get_app_settings() -> Settings:
    return get_settings()
