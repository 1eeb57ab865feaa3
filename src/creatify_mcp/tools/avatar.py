# SPDX-License-Identifier: MIT
"""Avatar tools using Creatify's lip-sync and avatar design APIs.

This module contains:
- Single-avatar lip-sync videos (v1 and the advanced v2 endpoint)
- Multi-avatar conversations
- Designing a custom avatar (DYOA)
"""

from typing import Any

from ..client import get_client
from ..config import logger
from ..models import AspectRatio, Gender, Intensity
from ..translate import (
    ConversationPart,
    advanced_lipsync_request,
    avatar_video_request,
    custom_avatar_request,
    multi_avatar_request,
)


async def create_avatar_video(
    text: str,
    avatar_id: str,
    aspect_ratio: AspectRatio,
    voice_id: str | None = None,
    name: str | None = None,
    green_screen: bool | None = None,
    no_captions: bool | None = None,
    no_music: bool | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Create a lip-sync video of one avatar speaking ``text``.

    Args:
        text: Script spoken by the avatar
        avatar_id: Avatar ID from creatify://avatars
        aspect_ratio: "16:9", "9:16" or "1:1"
        voice_id: Voice ID from creatify://voices (avatar default if omitted)
        name: Display name of the video
        green_screen: Render on a green screen background
        no_captions: Disable captions
        no_music: Disable background music
        webhook_url: URL notified on completion
        wait_for_completion: Block until the job is done, errored, or polling times out

    Returns:
        Lipsync job object (id, status, output when done)

    Raises:
        RuntimeError: If Creatify credentials are not set
        CreatifyAPIError: If the API rejects the request
    """
    client = get_client()
    payload = avatar_video_request(
        text=text,
        avatar_id=avatar_id,
        aspect_ratio=aspect_ratio,
        voice_id=voice_id,
        name=name,
        green_screen=green_screen,
        no_captions=no_captions,
        no_music=no_music,
        webhook_url=webhook_url,
    ).to_payload()

    if wait_for_completion:
        return await client.lipsync.create_and_wait(payload)
    return await client.lipsync.create(payload)


async def create_advanced_lipsync(
    text: str,
    avatar_id: str,
    voice_id: str,
    aspect_ratio: AspectRatio,
    emotion_intensity: Intensity | None = None,
    gesture_intensity: Intensity | None = None,
    background_music: str | None = None,
    name: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Create a lip-sync v2 video with emotion and gesture control.

    Intensities range from 0 to 1.
    """
    client = get_client()
    payload = advanced_lipsync_request(
        text=text,
        avatar_id=avatar_id,
        voice_id=voice_id,
        aspect_ratio=aspect_ratio,
        emotion_intensity=emotion_intensity,
        gesture_intensity=gesture_intensity,
        background_music=background_music,
        name=name,
        webhook_url=webhook_url,
    ).to_payload()

    if wait_for_completion:
        return await client.lipsync_v2.create_and_wait(payload)
    return await client.lipsync_v2.create(payload)


async def create_multi_avatar_conversation(
    conversation: list[ConversationPart],
    aspect_ratio: AspectRatio,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Create one video in which several avatars speak in turn.

    Args:
        conversation: Speaking turns in order; each has avatar_id, text, and optional voice_id / background_url
        aspect_ratio: "16:9", "9:16" or "1:1"
        webhook_url: URL notified on completion
        wait_for_completion: Block until the job is terminal (polled on the lipsync endpoint)

    Returns:
        Lipsync job object for the combined video
    """
    client = get_client()
    payload = multi_avatar_request(conversation, aspect_ratio=aspect_ratio, webhook_url=webhook_url).to_payload()
    logger.info("Creating conversation with %d turn(s)", len(payload["video_inputs"]))

    if wait_for_completion:
        return await client.multi_avatar.create_and_wait(payload)
    return await client.multi_avatar.create(payload)


async def create_custom_avatar(
    description: str,
    gender: Gender | None = None,
    age_range: str | None = None,
    ethnicity: str | None = None,
    clothing: str | None = None,
    background: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Design a new avatar from a text description (DYOA)."""
    client = get_client()
    payload = custom_avatar_request(
        description=description,
        gender=gender,
        age_range=age_range,
        ethnicity=ethnicity,
        clothing=clothing,
        background=background,
        webhook_url=webhook_url,
    ).to_payload()

    if wait_for_completion:
        return await client.custom_avatar.create_and_wait(payload)
    return await client.custom_avatar.create(payload)
