# SPDX-License-Identifier: MIT
"""Background music library management."""

from typing import Any, Literal

from ..client import get_client
from ..translate import music_upload_request


async def manage_music(
    action: Literal["list", "upload", "delete", "get"],
    music_id: str | None = None,
    music_url: str | None = None,
    name: str | None = None,
) -> Any:
    """List, upload, fetch or delete background music.

    Args:
        action: Operation to perform
        music_id: Required for "get" and "delete"
        music_url: Required for "upload"
        name: Optional display name for "upload"

    Raises:
        ValueError: If the argument an action needs is missing
    """
    client = get_client()

    if action == "list":
        return await client.list_music()

    if action == "upload":
        if not music_url:
            raise ValueError("music_url is required for upload action")
        return await client.create_music(music_upload_request(music_url, name=name).to_payload())

    if not music_id:
        raise ValueError(f"music_id is required for {action} action")
    if action == "delete":
        return await client.delete_music(music_id)
    return await client.get_music(music_id)
