"""
Outbound fetch of posts from the upstream JSON API.
"""

from __future__ import annotations

import logging

import requests
from pydantic import TypeAdapter, ValidationError

from todos.errors import UpstreamError
from todos.schemas import Post

logger = logging.getLogger(__name__)

_POSTS_ADAPTER = TypeAdapter(list[Post])


def fetch_posts(url: str, timeout: float) -> list[Post]:
    """
    Fetch and decode the list of posts at ``url``.

    Args:
        url (str): The upstream endpoint.
        timeout (float): Seconds to wait for connect and for each read.

    Returns:
        list[Post]: The decoded posts.

    Raises:
        UpstreamError: On any transport failure, non-2xx status, or a body
            that is not a JSON list of posts. A single attempt is made.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("posts fetch failed: %s", exc)
        raise UpstreamError(f"request to {url} failed") from exc

    try:
        return _POSTS_ADAPTER.validate_json(response.content)
    except ValidationError as exc:
        logger.warning("posts payload rejected: %s", exc.error_count())
        raise UpstreamError(f"invalid posts payload from {url}") from exc
