# SPDX-License-Identifier: MIT
"""Configuration management for creatify-mcp server.

This module handles:
- Creatify credential loading and validation
- HTTP and polling settings
- Logging setup
"""

import logging
import os
import sys
from dataclasses import dataclass

# ---------- Logging configuration ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,  # Log to stderr to avoid interfering with stdio MCP transport
)
logger = logging.getLogger("creatify_mcp")

DEFAULT_BASE_URL = "https://api.creatify.ai"
DEFAULT_HTTP_TIMEOUT = 300.0
DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_POLL_MAX_ATTEMPTS = 120  # 120 x 5s = 10 minutes


@dataclass(frozen=True)
class CreatifyCredentials:
    """Account identifier and secret key for the Creatify API."""

    api_id: str
    api_key: str


@dataclass(frozen=True)
class PollSettings:
    """Retry budget for waiting on a job."""

    interval: float
    max_attempts: int


# ---------- Credentials ----------
def get_credentials() -> CreatifyCredentials:
    """Read Creatify credentials from the environment.

    Returns:
        CreatifyCredentials with API ID and key

    Raises:
        RuntimeError: If CREATIFY_API_ID or CREATIFY_API_KEY is not set
    """
    required = ("CREATIFY_API_ID", "CREATIFY_API_KEY")
    missing = [name for name in required if not os.getenv(name, "").strip()]
    if missing:
        raise RuntimeError(
            f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} not set. "
            "Get your API credentials from your Creatify account settings"
        )
    return CreatifyCredentials(
        api_id=os.environ["CREATIFY_API_ID"].strip(),
        api_key=os.environ["CREATIFY_API_KEY"].strip(),
    )


def get_base_url() -> str:
    """Get the Creatify API root (without the ``/api`` prefix)."""
    return (os.getenv("CREATIFY_API_BASE_URL", "").strip() or DEFAULT_BASE_URL).rstrip("/")


# ---------- Numeric settings ----------
def _read_number(name: str, default: float, cast: type) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from e
    if value < 0:
        raise RuntimeError(f"{name} must not be negative, got {raw!r}")
    return value


def get_http_timeout() -> float:
    """Get the per-request transport timeout in seconds."""
    return _read_number("CREATIFY_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, float)


def get_poll_settings() -> PollSettings:
    """Get the polling interval and attempt budget used when waiting for jobs.

    Raises:
        RuntimeError: If a setting is malformed or the attempt budget is zero
    """
    interval = _read_number("CREATIFY_POLL_INTERVAL", DEFAULT_POLL_INTERVAL, float)
    max_attempts = int(_read_number("CREATIFY_POLL_MAX_ATTEMPTS", DEFAULT_POLL_MAX_ATTEMPTS, int))
    if max_attempts < 1:
        raise RuntimeError("CREATIFY_POLL_MAX_ATTEMPTS must be at least 1")
    return PollSettings(interval=interval, max_attempts=max_attempts)
