# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for Creatify MCP server tests."""

import pytest

from creatify_mcp.client import get_client


@pytest.fixture(autouse=True)
def clear_client_cache():
    """Reset the cached client so each test sees its own environment."""
    get_client.cache_clear()
    yield
    get_client.cache_clear()


@pytest.fixture
def creatify_env(monkeypatch):
    """Set Creatify credentials and a fast poll budget."""
    monkeypatch.setenv("CREATIFY_API_ID", "test-api-id")
    monkeypatch.setenv("CREATIFY_API_KEY", "test-api-key")
    monkeypatch.setenv("CREATIFY_POLL_INTERVAL", "0")
    monkeypatch.setenv("CREATIFY_POLL_MAX_ATTEMPTS", "3")


@pytest.fixture
def no_creatify_env(monkeypatch):
    """Remove every Creatify setting from the environment."""
    for name in (
        "CREATIFY_API_ID",
        "CREATIFY_API_KEY",
        "CREATIFY_API_BASE_URL",
        "CREATIFY_HTTP_TIMEOUT",
        "CREATIFY_POLL_INTERVAL",
        "CREATIFY_POLL_MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)


# ==================== Job payload fixtures ====================


@pytest.fixture
def job_processing():
    """Job as returned right after creation."""
    return {"id": "v1", "status": "processing"}


@pytest.fixture
def job_done():
    """Finished job with an output URL."""
    return {"id": "v1", "status": "done", "output": "https://example.com/v1.mp4"}


@pytest.fixture
def avatars():
    """Avatar collection as returned by the personas endpoint."""
    return [
        {"id": "a1", "creator_name": "Anna"},
        {"id": "a2", "creator_name": "John"},
    ]
