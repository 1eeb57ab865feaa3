# SPDX-License-Identifier: MIT
"""Usage guides served by the how_to_use tool."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Example:
    description: str
    code: str


@dataclass(frozen=True)
class ToolGuide:
    description: str
    required_params: dict[str, str]
    optional_params: dict[str, str] = field(default_factory=dict)
    examples: tuple[Example, ...] = ()


_WAIT = "true/false - wait for the job to finish before returning"

TOOL_GUIDES: dict[str, ToolGuide] = {
    "create_avatar_video": ToolGuide(
        description="Create AI avatar videos with lip-sync technology",
        required_params={
            "text": "Text for the avatar to speak (max 1000 characters)",
            "avatar_id": "ID of avatar (get from creatify://avatars resource)",
            "aspect_ratio": "Video format: '16:9' (landscape), '9:16' (portrait), '1:1' (square)",
        },
        optional_params={
            "voice_id": "Voice ID (get from creatify://voices resource)",
            "name": "Custom name for the video",
            "green_screen": "true/false - use green screen background",
            "no_captions": "true/false - disable captions",
            "no_music": "true/false - disable background music",
            "webhook_url": "URL notified when the video is ready",
            "wait_for_completion": _WAIT,
        },
        examples=(
            Example(
                "Simple avatar video",
                '{\n  "text": "Hello! Welcome to our product demo.",\n'
                '  "avatar_id": "anna_costume1_cameraA",\n  "aspect_ratio": "16:9"\n}',
            ),
            Example(
                "Avatar video with custom voice and green screen",
                '{\n  "text": "This is a professional presentation.",\n'
                '  "avatar_id": "john_suit_cameraB",\n  "aspect_ratio": "16:9",\n'
                '  "voice_id": "en-US-GuyNeural",\n  "green_screen": true,\n  "wait_for_completion": true\n}',
            ),
        ),
    ),
    "create_advanced_lipsync": ToolGuide(
        description="Create advanced lip-sync videos with enhanced emotion and gesture control",
        required_params={
            "text": "Text to be spoken by the avatar",
            "avatar_id": "ID of the avatar to use",
            "voice_id": "Voice ID for the avatar",
            "aspect_ratio": "Video format: '16:9', '9:16', '1:1'",
        },
        optional_params={
            "emotion_intensity": "Emotion intensity (0-1)",
            "gesture_intensity": "Gesture intensity (0-1)",
            "background_music": "Background music ID (see manage_music)",
            "name": "Custom name for the video",
            "wait_for_completion": _WAIT,
        },
        examples=(
            Example(
                "Expressive avatar video",
                '{\n  "text": "I\'m so excited to share this amazing news with you!",\n'
                '  "avatar_id": "anna_costume1_cameraA",\n  "voice_id": "en-US-AriaNeural",\n'
                '  "aspect_ratio": "16:9",\n  "emotion_intensity": 0.8,\n  "gesture_intensity": 0.7\n}',
            ),
        ),
    ),
    "create_url_to_video": ToolGuide(
        description="Convert websites into professional promotional videos",
        required_params={"url": "Website URL to convert (must be publicly accessible)"},
        optional_params={
            "visual_style": "Template style (e.g., 'DynamicProductTemplate', 'MinimalClean')",
            "script_style": "Narration style (e.g., 'EnthusiasticWriter', 'ProfessionalNarrator')",
            "aspect_ratio": "Video format: '16:9', '9:16', '1:1'",
            "language": "Language code (default: 'en')",
            "video_length": "Desired length in seconds",
            "target_audience": "Target audience description",
            "target_platform": "Platform optimization ('YouTube', 'TikTok', 'Instagram')",
            "wait_for_completion": _WAIT,
        },
        examples=(
            Example(
                "Convert product page to YouTube video",
                '{\n  "url": "https://example.com/product",\n  "visual_style": "DynamicProductTemplate",\n'
                '  "target_platform": "YouTube",\n  "aspect_ratio": "16:9"\n}',
            ),
        ),
    ),
    "generate_text_to_speech": ToolGuide(
        description="Generate natural-sounding speech from text",
        required_params={
            "text": "Text to convert to speech",
            "voice_id": "Voice ID (get from creatify://voices resource)",
        },
        optional_params={"name": "Custom name for the audio file", "wait_for_completion": _WAIT},
        examples=(
            Example(
                "Generate professional narration",
                '{\n  "text": "Welcome to our comprehensive guide.",\n'
                '  "voice_id": "en-US-AriaNeural",\n  "name": "intro-narration"\n}',
            ),
        ),
    ),
    "create_multi_avatar_conversation": ToolGuide(
        description="Create videos with multiple avatars having conversations",
        required_params={
            "conversation": "Array of turns, each with avatar_id and text (optional voice_id, background_url)",
            "aspect_ratio": "Video format: '16:9', '9:16', '1:1'",
        },
        optional_params={"wait_for_completion": _WAIT},
        examples=(
            Example(
                "Two-person conversation",
                '{\n  "conversation": [\n'
                '    {"avatar_id": "anna_costume1_cameraA", "text": "Hi! Let me introduce our new feature.",'
                ' "voice_id": "en-US-AriaNeural"},\n'
                '    {"avatar_id": "john_suit_cameraB", "text": "That sounds amazing! Tell me more.",'
                ' "voice_id": "en-US-GuyNeural"}\n'
                '  ],\n  "aspect_ratio": "16:9"\n}',
            ),
        ),
    ),
    "create_custom_template_video": ToolGuide(
        description="Generate videos using pre-designed custom templates",
        required_params={
            "template_id": "Template ID (get from creatify://templates resource)",
            "data": "Template data as key-value pairs (varies by template)",
        },
        optional_params={"aspect_ratio": "Video format override", "wait_for_completion": _WAIT},
        examples=(
            Example(
                "Product showcase template",
                '{\n  "template_id": "product-showcase-template",\n  "data": {\n'
                '    "productName": "Amazing Widget",\n    "price": "$99.99"\n  }\n}',
            ),
        ),
    ),
    "create_ai_edited_video": ToolGuide(
        description="Automatically edit and enhance existing videos using AI",
        required_params={
            "video_url": "URL to video file to be edited",
            "editing_style": "Editing style ('film', 'commercial', 'social', 'vlog')",
        },
        optional_params={"name": "Custom name for the edited video", "wait_for_completion": _WAIT},
        examples=(
            Example(
                "Edit raw footage into commercial",
                '{\n  "video_url": "https://example.com/raw-footage.mp4",\n'
                '  "editing_style": "commercial",\n  "name": "product-commercial"\n}',
            ),
        ),
    ),
    "create_ai_shorts": ToolGuide(
        description="Create short-form videos using AI (TikTok, Instagram Reels, YouTube Shorts)",
        required_params={"prompt": "Text prompt describing the short video content"},
        optional_params={
            "aspect_ratio": "Video format (default: '9:16' for shorts)",
            "duration": "Duration in seconds (typically 15-60 for shorts)",
            "style": "Visual style for the video",
            "wait_for_completion": _WAIT,
        },
        examples=(
            Example(
                "TikTok-style short",
                '{\n  "prompt": "A quick tutorial on making coffee with energetic music",\n'
                '  "aspect_ratio": "9:16",\n  "duration": 30,\n  "style": "energetic"\n}',
            ),
        ),
    ),
    "generate_ai_script": ToolGuide(
        description="Generate AI-powered scripts for videos",
        required_params={"topic": "Topic or subject for the script"},
        optional_params={
            "script_type": "Type of script ('commercial', 'educational', 'entertainment')",
            "duration": "Target duration in seconds",
            "tone": "Tone of script ('professional', 'casual', 'enthusiastic')",
            "target_audience": "Target audience description",
            "wait_for_completion": _WAIT,
        },
        examples=(
            Example(
                "Educational script",
                '{\n  "topic": "Introduction to renewable energy",\n  "script_type": "educational",\n'
                '  "duration": 120,\n  "tone": "professional"\n}',
            ),
        ),
    ),
    "create_custom_avatar": ToolGuide(
        description="Design and create your own custom avatar (DYOA - Design Your Own Avatar)",
        required_params={"description": "Detailed description of the avatar to create"},
        optional_params={
            "gender": "Gender ('male', 'female', 'non-binary')",
            "age_range": "Age range (e.g., '20-30', '40-50')",
            "ethnicity": "Ethnicity or appearance description",
            "clothing": "Clothing style description",
            "background": "Background setting description",
            "wait_for_completion": _WAIT,
        },
        examples=(
            Example(
                "Professional business avatar",
                '{\n  "description": "Professional businesswoman with confident demeanor",\n'
                '  "gender": "female",\n  "age_range": "30-40",\n  "clothing": "Navy blue business suit"\n}',
            ),
        ),
    ),
    "manage_music": ToolGuide(
        description="Manage music files for video backgrounds",
        required_params={"action": "Action to perform ('list', 'upload', 'delete', 'get')"},
        optional_params={
            "music_id": "Music ID (required for 'delete' and 'get' actions)",
            "music_url": "URL to music file (required for 'upload' action)",
            "name": "Name for the music (optional for 'upload' action)",
        },
        examples=(
            Example("List all available music", '{\n  "action": "list"\n}'),
            Example(
                "Upload new background music",
                '{\n  "action": "upload",\n  "music_url": "https://example.com/background-music.mp3",\n'
                '  "name": "Upbeat Background Track"\n}',
            ),
        ),
    ),
    "get_video_status": ToolGuide(
        description="Check status and progress of video generation tasks",
        required_params={
            "video_id": "ID of the video/task to check",
            "video_type": "Kind of job: 'lipsync', 'advanced-lipsync', 'url-to-video', 'text-to-speech', "
            "'multi-avatar', 'custom-template', 'ai-editing', 'ai-shorts', 'ai-script', 'custom-avatar'",
        },
        examples=(Example("Check avatar video status", '{\n  "video_id": "video_abc123",\n  "video_type": "lipsync"\n}'),),
    ),
}

_TIPS = (
    "Use creatify://avatars resource to get available avatar IDs",
    "Use creatify://voices resource to get available voice IDs",
    "Use creatify://credits resource to check remaining credits",
    "Set wait_for_completion=true for synchronous operation",
    "Use get_video_status to monitor long-running tasks",
)


def render_guide(tool_name: str, guide: ToolGuide, include_examples: bool = True) -> str:
    """Render one guide as Markdown."""
    lines = [f"# {tool_name}", "", guide.description, "", "## Required Parameters:"]
    lines += [f"- **{param}**: {desc}" for param, desc in guide.required_params.items()]

    if guide.optional_params:
        lines += ["", "## Optional Parameters:"]
        lines += [f"- **{param}**: {desc}" for param, desc in guide.optional_params.items()]

    if include_examples and guide.examples:
        lines += ["", "## Examples:"]
        for example in guide.examples:
            lines += ["", f"### {example.description}:", "```json", example.code, "```"]

    lines += ["", "## Tips:"]
    lines += [f"- {tip}" for tip in _TIPS]
    return "\n".join(lines) + "\n"
