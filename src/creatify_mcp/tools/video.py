# SPDX-License-Identifier: MIT
"""Video generation tools using Creatify's job APIs.

This module contains:
- URL-to-video (two-step: link, then video from link)
- Custom template videos
- AI editing of existing footage
- AI shorts
- Status lookup for any job kind
"""

from typing import Any, Literal

from pydantic import AnyHttpUrl

from ..client import get_client
from ..config import logger
from ..models import AspectRatio
from ..translate import (
    ai_editing_request,
    ai_shorts_request,
    custom_template_request,
    link_request,
    link_to_video_request,
)
from ..types import JobHandle, JobKind

VideoType = Literal[
    "lipsync",
    "advanced-lipsync",
    "url-to-video",
    "text-to-speech",
    "multi-avatar",
    "custom-template",
    "ai-editing",
    "ai-shorts",
    "ai-script",
    "custom-avatar",
]


async def create_url_to_video(
    url: AnyHttpUrl,
    visual_style: str | None = None,
    script_style: str | None = None,
    aspect_ratio: AspectRatio | None = None,
    language: str = "en",
    video_length: int | None = None,
    target_audience: str | None = None,
    target_platform: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Turn a web page into a promotional video.

    The page is first registered as a link; the video is then created from
    that link's id. If the link step fails, no video job is created.

    Returns:
        Dict with "link" (the created link) and "video" (the video job)

    Raises:
        CreatifyAPIError: If either API call is rejected
    """
    client = get_client()
    link = await client.create_link(link_request(str(url)).to_payload())

    payload = link_to_video_request(
        link_id=link["id"],
        language=language,
        visual_style=visual_style,
        script_style=script_style,
        aspect_ratio=aspect_ratio,
        video_length=video_length,
        target_audience=target_audience,
        target_platform=target_platform,
        webhook_url=webhook_url,
    ).to_payload()

    if wait_for_completion:
        video = await client.link_to_video.create_and_wait(payload)
    else:
        video = await client.link_to_video.create(payload)
    return {"link": link, "video": video}


async def create_custom_template_video(
    template_id: str,
    data: dict[str, Any],
    aspect_ratio: AspectRatio | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Render a custom template with the given variable values.

    Args:
        template_id: Template ID or name from creatify://templates
        data: Template variables (keys depend on the template)
    """
    client = get_client()
    payload = custom_template_request(
        template_id=template_id, data=data, aspect_ratio=aspect_ratio, webhook_url=webhook_url
    ).to_payload()

    if wait_for_completion:
        return await client.custom_template.create_and_wait(payload)
    return await client.custom_template.create(payload)


async def create_ai_edited_video(
    video_url: AnyHttpUrl,
    editing_style: str,
    name: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    client = get_client()
    payload = ai_editing_request(
        video_url=str(video_url), editing_style=editing_style, name=name, webhook_url=webhook_url
    ).to_payload()

    if wait_for_completion:
        return await client.ai_editing.create_and_wait(payload)
    return await client.ai_editing.create(payload)


async def create_ai_shorts(
    prompt: str,
    aspect_ratio: AspectRatio = "9:16",
    duration: int | None = None,
    style: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Create a short-form video from a prompt. Portrait (9:16) unless told otherwise."""
    client = get_client()
    payload = ai_shorts_request(
        prompt=prompt, aspect_ratio=aspect_ratio, duration=duration, style=style, webhook_url=webhook_url
    ).to_payload()

    if wait_for_completion:
        return await client.ai_shorts.create_and_wait(payload)
    return await client.ai_shorts.create(payload)


async def get_video_status(video_id: str, video_type: VideoType) -> dict[str, Any]:
    """Get the current status of a job.

    Args:
        video_id: Job ID returned by one of the create tools
        video_type: Kind of job; must match the tool that created it

    Returns:
        Job object with current status (and output once done)
    """
    handle = JobHandle(id=video_id, kind=JobKind(video_type))
    client = get_client()
    job = await client.jobs_for(handle.kind).get(handle.id)
    logger.info("Status of %s job %s: %s", handle.kind.value, handle.id, job.get("status"))
    return job
