"""
HTTP routes for the todos API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from todos.config import Settings
from todos.dependencies import get_app_settings, get_task_store
from todos.errors import TaskConflict, TaskNotFound, UpstreamError
from todos.proxy import fetch_posts
from todos.schemas import MAX_TASK_ID, Post, Todo
from todos.store import TaskStore
from todos.validation import read_todo_body

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/todos", response_model=list[Todo])
def list_todos(store: TaskStore = Depends(get_task_store)):
    return store.list()


@router.post("/todos", status_code=201)
def create_todo(
    todo: Todo = Depends(read_todo_body),
    store: TaskStore = Depends(get_task_store),
):
    logger.debug("create_todo: %r", todo)
    try:
        store.create(todo)
    except TaskConflict as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return Response(status_code=201)


@router.put("/todos/{task_id}")
def update_todo(
    task_id: int = Path(..., ge=0, le=MAX_TASK_ID),
    todo: Todo = Depends(read_todo_body),
    store: TaskStore = Depends(get_task_store),
):
    logger.debug("update_todo: id=%s, todo=%r", task_id, todo)
    try:
        store.update(task_id, todo)
    except TaskNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except TaskConflict as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return Response(status_code=200)


@router.delete("/todos/{task_id}", status_code=204)
def delete_todo(
    task_id: int = Path(..., ge=0, le=MAX_TASK_ID),
    store: TaskStore = Depends(get_task_store),
):
    logger.debug("delete_todo: id=%s", task_id)
    try:
        store.delete(task_id)
    except TaskNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)


@router.get("/posts", response_model=list[Post])
def list_posts(settings: Settings = Depends(get_app_settings)):
    """
    Relay the upstream posts. Runs in the worker pool, so a slow upstream
    only holds this request.
    """
    logger.debug("list_posts")
    try:
        return fetch_posts(
            settings.posts_url, timeout=settings.upstream_timeout_seconds
        )
    except UpstreamError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
