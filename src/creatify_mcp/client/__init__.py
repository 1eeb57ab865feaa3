# SPDX-License-Identifier: MIT
"""Async client for the Creatify REST API.

Usage::

    from creatify_mcp.client import get_client

    client = get_client()
    job = await client.lipsync.create({"text": "Hi", "creator": "a1", "aspect_ratio": "16:9"})
    job = await client.lipsync.get(job["id"])
"""

from .factory import get_client
from .http import CreatifyClient, JobResource
from .protocol import JobAPI, JobPayload

__all__ = ["CreatifyClient", "JobAPI", "JobPayload", "JobResource", "get_client"]
