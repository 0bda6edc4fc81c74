"""
FastAPI application entry point for the todos service.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todos.errors import StoreUnavailable
from todos.routes import router

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("todos")


async def _http_error(request: Request, exc: StarletteHTTPException) -> Response:
    logger.debug(
        "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail
    )
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_error(request: Request, exc: RequestValidationError) -> Response:
    # A path segment that is not a valid id means the route did not match.
    if any(error.get("loc", ("",))[0] == "path" for error in exc.errors()):
        status_code = 404
    else:
        status_code = 400
    logger.debug(
        "%s %s -> %s: %s", request.method, request.url.path, status_code, exc.errors()
    )
    return Response(status_code=status_code)


async def _store_unavailable(request: Request, exc: StoreUnavailable) -> Response:
    logger.error("%s %s -> 500: %s", request.method, request.url.path, exc)
    return Response(status_code=500)


async def _access_log(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        client = f"{request.client.host}:{request.client.port}" if request.client else "-"
        access_logger.info(
            '%s "%s %s HTTP/%s" %s "%s" "%s" %.3fms',
            client,
            request.method,
            request.url.path,
            request.scope.get("http_version", "1.1"),
            status_code,
            request.headers.get("referer", "-"),
            request.headers.get("user-agent", "-"),
            elapsed_ms,
        )


def create_app() -> FastAPI:
    app = FastAPI(title="Todos", version="0.1.0")
    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StoreUnavailable, _store_unavailable)
    app.middleware("http")(_access_log)
    return app


app = create_app()
