# SPDX-License-Identifier: MIT
"""Tool and resource descriptions for MCP server. Optimized for token efficiency."""

_WAIT_NOTE = "Async by default (returns job id + status). wait_for_completion=true blocks up to ~10 min; check status on return."

# ==================== AVATAR TOOL DESCRIPTIONS ====================

CREATE_AVATAR_VIDEO = f"""Create lip-sync video of an avatar speaking text. {_WAIT_NOTE}

Params: text, avatar_id (creatify://avatars), aspect_ratio (16:9|9:16|1:1), voice_id (creatify://voices), name, green_screen, no_captions, no_music, webhook_url

Example: create_avatar_video(text="Hi there", avatar_id="anna_costume1_cameraA", aspect_ratio="16:9")"""

CREATE_ADVANCED_LIPSYNC = f"""Create lip-sync v2 video with emotion/gesture control. {_WAIT_NOTE}

Params: text, avatar_id, voice_id, aspect_ratio (16:9|9:16|1:1), emotion_intensity (0-1), gesture_intensity (0-1), background_music (music id), name, webhook_url"""

CREATE_MULTI_AVATAR_CONVERSATION = f"""Create one video of several avatars talking in turn (list order = speaking order). {_WAIT_NOTE}

Params: conversation (list of {{avatar_id, text, voice_id?, background_url?}}), aspect_ratio (16:9|9:16|1:1), webhook_url

Poll with get_video_status(video_type="multi-avatar")."""

CREATE_CUSTOM_AVATAR = f"""Design a custom avatar from a description (DYOA). {_WAIT_NOTE}

Params: description, gender (male|female|non-binary), age_range, ethnicity, clothing, background, webhook_url"""


# ==================== VIDEO TOOL DESCRIPTIONS ====================

CREATE_URL_TO_VIDEO = f"""Turn a web page into a promo video. Returns {{link, video}}. {_WAIT_NOTE}

Params: url, visual_style, script_style, aspect_ratio (16:9|9:16|1:1), language (default en), video_length (seconds), target_audience, target_platform, webhook_url

Poll with get_video_status(video.id, video_type="url-to-video")."""

CREATE_CUSTOM_TEMPLATE_VIDEO = f"""Render a custom template with variable data. {_WAIT_NOTE}

Params: template_id (creatify://templates), data (template variables), aspect_ratio, webhook_url"""

CREATE_AI_EDITED_VIDEO = f"""Auto-edit existing footage with AI. {_WAIT_NOTE}

Params: video_url, editing_style (film|commercial|social|vlog), name, webhook_url"""

CREATE_AI_SHORTS = f"""Create short-form video (TikTok/Reels/Shorts) from a prompt. {_WAIT_NOTE}

Params: prompt, aspect_ratio (default 9:16), duration (seconds, 15-60 typical), style, webhook_url"""

GET_VIDEO_STATUS = """Get job status. Call until status='done' or 'error'.

Params: video_id, video_type (lipsync|advanced-lipsync|url-to-video|text-to-speech|multi-avatar|custom-template|ai-editing|ai-shorts|ai-script|custom-avatar) - must match the tool that created the job

Returns: id, status, output URLs once done"""


# ==================== AUDIO / SCRIPT TOOL DESCRIPTIONS ====================

GENERATE_TEXT_TO_SPEECH = f"""Text-to-speech with a Creatify voice. {_WAIT_NOTE}

Params: text, voice_id (creatify://voices), name, webhook_url"""

GENERATE_AI_SCRIPT = f"""Write a video script with AI. {_WAIT_NOTE}

Params: topic, script_type (commercial|educational|entertainment), duration (seconds), tone, target_audience, webhook_url"""


# ==================== OTHER TOOL DESCRIPTIONS ====================

MANAGE_MUSIC = """Manage background music library.

Params: action (list|upload|delete|get), music_id (get/delete), music_url (upload), name (upload)

Example: manage_music(action="upload", music_url="https://example.com/track.mp3")"""

HOW_TO_USE = """Detailed usage guide (parameters, examples, tips) for any Creatify tool.

Params: tool_name, include_examples (default true)"""


# ==================== RESOURCE DESCRIPTIONS ====================

AVATARS = "All avatars available to the workspace (use id with avatar tools)"
VOICES = "All voices available for avatar videos and text-to-speech"
TEMPLATES = "Custom video templates for create_custom_template_video"
CREDITS = "Remaining workspace credits"
MUSIC = "Background music library"
AVATAR_DETAILS = "Details of a single avatar by id"
