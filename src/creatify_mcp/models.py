# SPDX-License-Identifier: MIT
"""Request bodies for the Creatify job endpoints.

One model per capability. Optional fields default to ``None`` and are left out
of the serialized body entirely, so the API can tell "not specified" apart
from an explicit ``False`` or empty string.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from .types import JobKind

AspectRatio = Literal["16:9", "9:16", "1:1"]
Gender = Literal["male", "female", "non-binary"]
Intensity = Annotated[float, Field(ge=0, le=1)]


class VendorRequest(BaseModel):
    """Base for all request bodies sent to Creatify."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[JobKind | None] = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body, omitting every unset optional field."""
        return self.model_dump(mode="json", exclude_none=True)


# ==================== AVATAR ====================


class LipsyncRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.LIPSYNC

    text: str
    creator: str
    aspect_ratio: AspectRatio
    accent: str | None = None
    name: str | None = None
    green_screen: bool | None = None
    no_caption: bool | None = None
    no_music: bool | None = None
    webhook_url: str | None = None


class AdvancedLipsyncRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.ADVANCED_LIPSYNC

    text: str
    avatar_id: str
    voice_id: str
    aspect_ratio: AspectRatio
    emotion_intensity: Intensity | None = None
    gesture_intensity: Intensity | None = None
    background_music: str | None = None
    name: str | None = None
    webhook_url: str | None = None


class AvatarCharacter(VendorRequest):
    type: Literal["avatar"] = "avatar"
    avatar_id: str
    avatar_style: str = "normal"


class TextVoice(VendorRequest):
    type: Literal["text"] = "text"
    input_text: str
    voice_id: str | None = None


class ImageBackground(VendorRequest):
    type: Literal["image"] = "image"
    url: str


class VideoInput(VendorRequest):
    """One speaking turn of a multi-avatar conversation."""

    character: AvatarCharacter
    voice: TextVoice
    background: ImageBackground | None = None


class MultiAvatarRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.MULTI_AVATAR

    video_inputs: tuple[VideoInput, ...]
    aspect_ratio: AspectRatio
    webhook_url: str | None = None


class CustomAvatarRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.CUSTOM_AVATAR

    description: str
    gender: Gender | None = None
    age_range: str | None = None
    ethnicity: str | None = None
    clothing: str | None = None
    background: str | None = None
    webhook_url: str | None = None


# ==================== VIDEO ====================


class LinkRequest(VendorRequest):
    url: str


class LinkToVideoRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.URL_TO_VIDEO

    link: str
    language: str
    visual_style: str | None = None
    script_style: str | None = None
    aspect_ratio: AspectRatio | None = None
    video_length: int | None = None
    target_audience: str | None = None
    target_platform: str | None = None
    webhook_url: str | None = None


class CustomTemplateRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.CUSTOM_TEMPLATE

    visual_style: str
    data: dict[str, Any]
    aspect_ratio: AspectRatio | None = None
    webhook_url: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        # Template data is user content and goes out untouched, null values included
        payload["data"] = dict(self.data)
        return payload


class AiEditingRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.AI_EDITING

    video_url: str
    editing_style: str
    name: str | None = None
    webhook_url: str | None = None


class AiShortsRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.AI_SHORTS

    prompt: str
    aspect_ratio: AspectRatio
    duration: int | None = None
    style: str | None = None
    webhook_url: str | None = None


# ==================== AUDIO / SCRIPT ====================


class TextToSpeechRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.TEXT_TO_SPEECH

    script: str
    accent: str
    name: str | None = None
    webhook_url: str | None = None


class AiScriptRequest(VendorRequest):
    kind: ClassVar[JobKind | None] = JobKind.AI_SCRIPT

    topic: str
    script_type: str | None = None
    duration: int | None = None
    tone: str | None = None
    target_audience: str | None = None
    webhook_url: str | None = None


class MusicUploadRequest(VendorRequest):
    music_url: str
    name: str | None = None
