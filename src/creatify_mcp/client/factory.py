# SPDX-License-Identifier: MIT
"""Creatify client factory.

Builds the process-wide :class:`CreatifyClient` from environment
configuration and closes its httpx client at exit.
"""

from __future__ import annotations

import atexit
import logging
from functools import lru_cache

from ..config import get_base_url, get_credentials, get_http_timeout
from .http import CreatifyClient

logger = logging.getLogger("creatify_mcp")


@lru_cache(maxsize=1)
def get_client() -> CreatifyClient:
    """Return the configured :class:`CreatifyClient` (cached singleton).

    Configuration
    -------------
    ``CREATIFY_API_ID`` / ``CREATIFY_API_KEY``
        Required credentials.
    ``CREATIFY_API_BASE_URL``
        Optional API root, default ``https://api.creatify.ai``.
    ``CREATIFY_HTTP_TIMEOUT``
        Optional transport timeout in seconds, default 300.

    Raises:
        RuntimeError: If credentials are missing or a setting is malformed
    """
    credentials = get_credentials()
    client = CreatifyClient(
        api_id=credentials.api_id,
        api_key=credentials.api_key,
        base_url=get_base_url(),
        timeout=get_http_timeout(),
    )
    _register_cleanup(client)
    return client


def _register_cleanup(client: CreatifyClient) -> None:
    """Register an atexit handler to close the client's httpx connection pool."""

    def _cleanup() -> None:
        import asyncio

        try:
            loop = asyncio.get_running_loop()
            loop.create_task(client.aclose())
        except RuntimeError:
            # No running loop, run synchronously
            asyncio.run(client.aclose())
        logger.debug("Creatify httpx client closed")

    atexit.register(_cleanup)
