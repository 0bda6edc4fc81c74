"""
Request-body stage run before any store operation.

Bodies are size-checked first and only then parsed as a todo.
"""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request
from pydantic import ValidationError

from todos.config import Settings
from todos.dependencies import get_app_settings
from todos.errors import InvalidBody
from todos.schemas import Todo

logger = logging.getLogger(__name__)


def check_body_size(body_length: int, limit: int) -> None:
    if body_length > limit:
        raise InvalidBody(f"body of {body_length} bytes exceeds limit of {limit}")


def parse_todo(raw: bytes) -> Todo:
    try:
        return Todo.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidBody(f"malformed todo body: {exc.error_count()} error(s)") from exc


async def read_todo_body(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> Todo:
    """
    FastAPI dependency yielding the parsed todo from the request body.

    A declared Content-Length over the limit is rejected without reading;
    otherwise reading stops at the first chunk that crosses the limit.
    """
    limit = settings.max_body_bytes
    try:
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                declared_length = int(declared)
            except ValueError as exc:
                raise InvalidBody(f"invalid content-length: {declared!r}") from exc
            check_body_size(declared_length, limit)

        # Chunked bodies carry no length, so count while streaming.
        chunks: list[bytes] = []
        received = 0
        async for chunk in request.stream():
            received += len(chunk)
            check_body_size(received, limit)
            chunks.append(chunk)
        return parse_todo(b"".join(chunks))
    except InvalidBody as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
