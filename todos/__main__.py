"""
Run the todos server under uvicorn.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from todos.app import create_app
from todos.config import get_settings
from todos.logging_setup import setup_logging

logger = logging.getLogger("todos")


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="In-memory todos server")
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help="Address to listen on",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port to listen on",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Level for todos loggers (DEBUG shows handler traces)",
    )
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger.info("listening on http://%s:%s", args.host, args.port)
    uvicorn.run(
        create_app(), host=args.host, port=args.port, access_log=False, log_config=None
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
