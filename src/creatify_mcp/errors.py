# SPDX-License-Identifier: MIT
"""Exceptions raised by creatify-mcp."""

from __future__ import annotations

from typing import Any


class CreatifyError(Exception):
    """Base class for all creatify-mcp errors."""


class CreatifyAPIError(CreatifyError):
    """The Creatify API answered with a non-success status code."""

    def __init__(self, status_code: int, method: str, path: str, detail: str) -> None:
        self.status_code = status_code
        self.method = method
        self.path = path
        self.detail = detail
        super().__init__(f"{method} {path} failed with HTTP {status_code}: {detail}")

    @staticmethod
    def extract_detail(body: Any, fallback: str) -> str:
        """Pull a human-readable message out of a decoded error body."""
        if isinstance(body, dict):
            for key in ("detail", "message", "error"):
                value = body.get(key)
                if value:
                    return value if isinstance(value, str) else str(value)
        return fallback or "no response body"


class NotFoundError(CreatifyError, LookupError):
    """A requested entity is not present in the fetched collection."""
