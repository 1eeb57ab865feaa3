# SPDX-License-Identifier: MIT
"""Translation from tool arguments to Creatify request bodies.

Every function here is pure: it renames the tool's argument names to the
vendor's field names and copies optional values only when the caller gave
them. Schema-level defaults are applied by the tool signatures, not here.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from .models import (
    AdvancedLipsyncRequest,
    AiEditingRequest,
    AiScriptRequest,
    AiShortsRequest,
    AspectRatio,
    AvatarCharacter,
    CustomAvatarRequest,
    CustomTemplateRequest,
    Gender,
    ImageBackground,
    LinkRequest,
    LinkToVideoRequest,
    LipsyncRequest,
    MultiAvatarRequest,
    MusicUploadRequest,
    TextToSpeechRequest,
    TextVoice,
    VideoInput,
)


class ConversationPart(BaseModel):
    """One entry of the ``conversation`` argument, in speaking order."""

    avatar_id: str
    text: str
    voice_id: str | None = None
    background_url: str | None = None


def _present(**fields: Any) -> dict[str, Any]:
    """Keep only the keyword arguments the caller actually supplied."""
    return {key: value for key, value in fields.items() if value is not None}


# ==================== AVATAR ====================


def avatar_video_request(
    text: str,
    avatar_id: str,
    aspect_ratio: AspectRatio,
    voice_id: str | None = None,
    name: str | None = None,
    green_screen: bool | None = None,
    no_captions: bool | None = None,
    no_music: bool | None = None,
    webhook_url: str | None = None,
) -> LipsyncRequest:
    return LipsyncRequest(
        text=text,
        creator=avatar_id,
        aspect_ratio=aspect_ratio,
        **_present(
            accent=voice_id,
            name=name,
            green_screen=green_screen,
            no_caption=no_captions,
            no_music=no_music,
            webhook_url=webhook_url,
        ),
    )


def advanced_lipsync_request(
    text: str,
    avatar_id: str,
    voice_id: str,
    aspect_ratio: AspectRatio,
    emotion_intensity: float | None = None,
    gesture_intensity: float | None = None,
    background_music: str | None = None,
    name: str | None = None,
    webhook_url: str | None = None,
) -> AdvancedLipsyncRequest:
    return AdvancedLipsyncRequest(
        text=text,
        avatar_id=avatar_id,
        voice_id=voice_id,
        aspect_ratio=aspect_ratio,
        **_present(
            emotion_intensity=emotion_intensity,
            gesture_intensity=gesture_intensity,
            background_music=background_music,
            name=name,
            webhook_url=webhook_url,
        ),
    )


def video_input(part: ConversationPart) -> VideoInput:
    """Build the vendor sub-structure for one conversation turn."""
    background = ImageBackground(url=part.background_url) if part.background_url is not None else None
    return VideoInput(
        character=AvatarCharacter(avatar_id=part.avatar_id),
        voice=TextVoice(input_text=part.text, **_present(voice_id=part.voice_id)),
        **_present(background=background),
    )


def multi_avatar_request(
    conversation: Iterable[ConversationPart],
    aspect_ratio: AspectRatio,
    webhook_url: str | None = None,
) -> MultiAvatarRequest:
    """Fan the conversation out into one video input per turn, preserving order."""
    video_inputs = tuple(video_input(part) for part in conversation)
    if not video_inputs:
        raise ValueError("conversation must contain at least one entry")
    return MultiAvatarRequest(
        video_inputs=video_inputs,
        aspect_ratio=aspect_ratio,
        **_present(webhook_url=webhook_url),
    )


def custom_avatar_request(
    description: str,
    gender: Gender | None = None,
    age_range: str | None = None,
    ethnicity: str | None = None,
    clothing: str | None = None,
    background: str | None = None,
    webhook_url: str | None = None,
) -> CustomAvatarRequest:
    return CustomAvatarRequest(
        description=description,
        **_present(
            gender=gender,
            age_range=age_range,
            ethnicity=ethnicity,
            clothing=clothing,
            background=background,
            webhook_url=webhook_url,
        ),
    )


# ==================== VIDEO ====================


def link_request(url: str) -> LinkRequest:
    return LinkRequest(url=url)


def link_to_video_request(
    link_id: str,
    language: str,
    visual_style: str | None = None,
    script_style: str | None = None,
    aspect_ratio: AspectRatio | None = None,
    video_length: int | None = None,
    target_audience: str | None = None,
    target_platform: str | None = None,
    webhook_url: str | None = None,
) -> LinkToVideoRequest:
    """Second step of URL-to-video: needs the id of the link created in step one."""
    return LinkToVideoRequest(
        link=link_id,
        language=language,
        **_present(
            visual_style=visual_style,
            script_style=script_style,
            aspect_ratio=aspect_ratio,
            video_length=video_length,
            target_audience=target_audience,
            target_platform=target_platform,
            webhook_url=webhook_url,
        ),
    )


def custom_template_request(
    template_id: str,
    data: dict[str, Any],
    aspect_ratio: AspectRatio | None = None,
    webhook_url: str | None = None,
) -> CustomTemplateRequest:
    return CustomTemplateRequest(
        visual_style=template_id,
        data=data,
        **_present(aspect_ratio=aspect_ratio, webhook_url=webhook_url),
    )


def ai_editing_request(
    video_url: str,
    editing_style: str,
    name: str | None = None,
    webhook_url: str | None = None,
) -> AiEditingRequest:
    return AiEditingRequest(
        video_url=video_url,
        editing_style=editing_style,
        **_present(name=name, webhook_url=webhook_url),
    )


def ai_shorts_request(
    prompt: str,
    aspect_ratio: AspectRatio,
    duration: int | None = None,
    style: str | None = None,
    webhook_url: str | None = None,
) -> AiShortsRequest:
    return AiShortsRequest(
        prompt=prompt,
        aspect_ratio=aspect_ratio,
        **_present(duration=duration, style=style, webhook_url=webhook_url),
    )


# ==================== AUDIO / SCRIPT ====================


def text_to_speech_request(
    text: str,
    voice_id: str,
    name: str | None = None,
    webhook_url: str | None = None,
) -> TextToSpeechRequest:
    return TextToSpeechRequest(
        script=text,
        accent=voice_id,
        **_present(name=name, webhook_url=webhook_url),
    )


def ai_script_request(
    topic: str,
    script_type: str | None = None,
    duration: int | None = None,
    tone: str | None = None,
    target_audience: str | None = None,
    webhook_url: str | None = None,
) -> AiScriptRequest:
    return AiScriptRequest(
        topic=topic,
        **_present(
            script_type=script_type,
            duration=duration,
            tone=tone,
            target_audience=target_audience,
            webhook_url=webhook_url,
        ),
    )


def music_upload_request(music_url: str, name: str | None = None) -> MusicUploadRequest:
    return MusicUploadRequest(music_url=music_url, **_present(name=name))
