# SPDX-License-Identifier: MIT
"""Unit tests for tool argument -> vendor request translation."""

import pytest
from pydantic import ValidationError

from creatify_mcp.translate import (
    ConversationPart,
    advanced_lipsync_request,
    ai_editing_request,
    ai_script_request,
    ai_shorts_request,
    avatar_video_request,
    custom_avatar_request,
    custom_template_request,
    link_to_video_request,
    multi_avatar_request,
    music_upload_request,
    text_to_speech_request,
)


@pytest.mark.unit
class TestOmission:
    """Optional arguments the caller leaves out never reach the request body."""

    def test_avatar_video_minimal(self):
        """Only required fields are sent, under vendor names."""
        payload = avatar_video_request(text="Hi", avatar_id="a1", aspect_ratio="16:9").to_payload()

        assert payload == {"text": "Hi", "creator": "a1", "aspect_ratio": "16:9"}

    def test_avatar_video_explicit_false_is_sent(self):
        """Explicit False flags are sent; unset options are not."""
        payload = avatar_video_request(
            text="Hi",
            avatar_id="a1",
            aspect_ratio="1:1",
            green_screen=False,
            no_captions=False,
            no_music=True,
        ).to_payload()

        assert payload["green_screen"] is False
        assert payload["no_caption"] is False
        assert payload["no_music"] is True
        assert "accent" not in payload
        assert "name" not in payload

    def test_avatar_video_renames_all_options(self):
        """Every optional argument maps to its vendor field."""
        payload = avatar_video_request(
            text="Hi",
            avatar_id="a1",
            aspect_ratio="9:16",
            voice_id="v9",
            name="demo",
            webhook_url="https://hook.example.com",
        ).to_payload()

        assert payload == {
            "text": "Hi",
            "creator": "a1",
            "aspect_ratio": "9:16",
            "accent": "v9",
            "name": "demo",
            "webhook_url": "https://hook.example.com",
        }

    def test_explicit_empty_string_is_sent(self):
        """An explicit empty string is not treated as omitted."""
        payload = text_to_speech_request(text="Hello", voice_id="v1", name="").to_payload()

        assert payload == {"script": "Hello", "accent": "v1", "name": ""}

    @pytest.mark.parametrize(
        "request_model, required",
        [
            (advanced_lipsync_request(text="t", avatar_id="a", voice_id="v", aspect_ratio="16:9"),
             {"text", "avatar_id", "voice_id", "aspect_ratio"}),
            (link_to_video_request(link_id="l1", language="en"), {"link", "language"}),
            (text_to_speech_request(text="t", voice_id="v"), {"script", "accent"}),
            (custom_template_request(template_id="tpl", data={}), {"visual_style", "data"}),
            (ai_editing_request(video_url="u", editing_style="film"), {"video_url", "editing_style"}),
            (ai_shorts_request(prompt="p", aspect_ratio="9:16"), {"prompt", "aspect_ratio"}),
            (ai_script_request(topic="t"), {"topic"}),
            (custom_avatar_request(description="d"), {"description"}),
            (music_upload_request(music_url="u"), {"music_url"}),
        ],
    )
    def test_only_required_keys_without_options(self, request_model, required):
        """Each request carries just its required keys by default."""
        assert set(request_model.to_payload()) == required

    def test_zero_values_are_kept(self):
        """Zero is sent, not dropped."""
        payload = advanced_lipsync_request(
            text="t", avatar_id="a", voice_id="v", aspect_ratio="16:9", emotion_intensity=0.0
        ).to_payload()

        assert payload["emotion_intensity"] == 0.0
        assert "gesture_intensity" not in payload


@pytest.mark.unit
class TestRenames:
    def test_text_to_speech(self):
        """text and voice_id become script and accent."""
        payload = text_to_speech_request(text="Hello", voice_id="v1", webhook_url="https://h").to_payload()

        assert payload == {"script": "Hello", "accent": "v1", "webhook_url": "https://h"}

    def test_custom_template_uses_template_as_visual_style(self):
        """template_id is sent as visual_style."""
        payload = custom_template_request(template_id="tpl-1", data={"a": 1}, aspect_ratio="1:1").to_payload()

        assert payload == {"visual_style": "tpl-1", "data": {"a": 1}, "aspect_ratio": "1:1"}

    def test_custom_template_data_sent_verbatim(self):
        """Template data keeps None and empty values."""
        payload = custom_template_request(template_id="tpl", data={"price": None, "tags": []}).to_payload()

        assert payload["data"] == {"price": None, "tags": []}

    def test_link_to_video_uses_link_id(self):
        """The link id is sent as link."""
        payload = link_to_video_request(
            link_id="link-7",
            language="fr",
            video_length=30,
            target_platform="TikTok",
        ).to_payload()

        assert payload == {"link": "link-7", "language": "fr", "video_length": 30, "target_platform": "TikTok"}

    def test_custom_avatar_renames_age_range(self):
        """Custom avatar options pass through."""
        payload = custom_avatar_request(description="d", gender="female", age_range="30-40").to_payload()

        assert payload == {"description": "d", "gender": "female", "age_range": "30-40"}


@pytest.mark.unit
class TestMultiAvatar:
    def test_turns_keep_order_and_nest_options(self):
        """Conversation turns keep their order and nest per-turn options."""
        conversation = [
            ConversationPart(avatar_id="a1", text="first", voice_id="v1"),
            ConversationPart(avatar_id="a2", text="second", background_url="https://bg.example.com/x.png"),
            ConversationPart(avatar_id="a1", text="third"),
        ]

        payload = multi_avatar_request(conversation, aspect_ratio="16:9").to_payload()

        assert payload["aspect_ratio"] == "16:9"
        assert "webhook_url" not in payload
        inputs = payload["video_inputs"]
        assert [i["voice"]["input_text"] for i in inputs] == ["first", "second", "third"]
        assert inputs[0] == {
            "character": {"type": "avatar", "avatar_id": "a1", "avatar_style": "normal"},
            "voice": {"type": "text", "input_text": "first", "voice_id": "v1"},
        }
        assert inputs[1]["background"] == {"type": "image", "url": "https://bg.example.com/x.png"}
        assert "voice_id" not in inputs[1]["voice"]
        assert "background" not in inputs[2]

    def test_empty_conversation_rejected(self):
        """An empty conversation is rejected."""
        with pytest.raises(ValueError, match="at least one entry"):
            multi_avatar_request([], aspect_ratio="16:9")


@pytest.mark.unit
class TestEnumerations:
    def test_bad_aspect_ratio_rejected(self):
        """Unsupported aspect ratios fail validation."""
        with pytest.raises(ValidationError):
            avatar_video_request(text="t", avatar_id="a", aspect_ratio="4:3")

    def test_bad_gender_rejected(self):
        """Unsupported genders fail validation."""
        with pytest.raises(ValidationError):
            custom_avatar_request(description="d", gender="robot")

    def test_requests_are_immutable(self):
        """Request models are frozen."""
        request = ai_script_request(topic="t")

        with pytest.raises(ValidationError):
            request.topic = "other"
