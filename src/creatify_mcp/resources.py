# SPDX-License-Identifier: MIT
"""Read-only MCP resources backed by Creatify collection endpoints.

Fetch errors are re-raised (resources have no error-result convention), so
the host reports them as failed reads.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from .client import get_client
from .errors import CreatifyError, NotFoundError
from .formatting import error_message, json_resource


async def _fetch(what: str, call: Callable[[], Awaitable[Any]]) -> str:
    try:
        return json_resource(await call())
    except NotFoundError as e:
        raise NotFoundError(f"Failed to fetch {what}: {error_message(e)}") from e
    except Exception as e:
        raise CreatifyError(f"Failed to fetch {what}: {error_message(e)}") from e


async def get_avatars() -> str:
    return await _fetch("avatars", lambda: get_client().list_avatars())


async def get_voices() -> str:
    return await _fetch("voices", lambda: get_client().list_voices())


async def get_templates() -> str:
    return await _fetch("templates", lambda: get_client().list_templates())


async def get_credits() -> str:
    return await _fetch("credits", lambda: get_client().remaining_credits())


async def get_music() -> str:
    return await _fetch("music", lambda: get_client().list_music())


def find_avatar(avatars: list[dict[str, Any]], avatar_id: str) -> dict[str, Any]:
    """Linear search of the avatar collection; there is no single-avatar endpoint.

    Raises:
        NotFoundError: If no avatar carries ``avatar_id`` as its ``avatar_id`` or ``id``
    """
    for avatar in avatars:
        if avatar.get("avatar_id") == avatar_id or avatar.get("id") == avatar_id:
            return avatar
    raise NotFoundError(f"Avatar {avatar_id} not found")


async def get_avatar(avatar_id: str) -> str:
    """Details of one avatar, looked up in the full avatar list."""

    async def lookup() -> dict[str, Any]:
        return find_avatar(await get_client().list_avatars(), avatar_id)

    return await _fetch(f"avatar {avatar_id}", lookup)
