# SPDX-License-Identifier: MIT
"""Speech and script tools: text-to-speech and AI script writing."""

from typing import Any

from ..client import get_client
from ..translate import ai_script_request, text_to_speech_request


async def generate_text_to_speech(
    text: str,
    voice_id: str,
    name: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    """Synthesize ``text`` with the given voice.

    Args:
        text: Text to speak
        voice_id: Voice ID from creatify://voices
        name: Display name of the task
        webhook_url: URL notified on completion
        wait_for_completion: Block until the audio is ready

    Returns:
        Text-to-speech job object (output audio URL once done)
    """
    client = get_client()
    payload = text_to_speech_request(text=text, voice_id=voice_id, name=name, webhook_url=webhook_url).to_payload()

    if wait_for_completion:
        return await client.text_to_speech.create_and_wait(payload)
    return await client.text_to_speech.create(payload)


async def generate_ai_script(
    topic: str,
    script_type: str | None = None,
    duration: int | None = None,
    tone: str | None = None,
    target_audience: str | None = None,
    webhook_url: str | None = None,
    wait_for_completion: bool = False,
) -> dict[str, Any]:
    client = get_client()
    payload = ai_script_request(
        topic=topic,
        script_type=script_type,
        duration=duration,
        tone=tone,
        target_audience=target_audience,
        webhook_url=webhook_url,
    ).to_payload()

    if wait_for_completion:
        return await client.ai_script.create_and_wait(payload)
    return await client.ai_script.create(payload)
