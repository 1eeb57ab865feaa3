# SPDX-License-Identifier: MIT
"""Creatify MCP Server - FastMCP server for the Creatify video generation API.

This module declares the tool/resource table and runs the server.
Business logic is organized into submodules under tools/.
"""

import sys

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from . import descriptions as d
from . import resources
from .config import get_credentials, logger
from .registry import Registry, RegistryBuilder
from .tools import audio, avatar, music, usage, video


def build_registry() -> Registry:
    """Declare every tool and resource served by the server."""
    return (
        RegistryBuilder()
        # ==================== AVATAR TOOLS ====================
        .tool(
            "create_avatar_video",
            avatar.create_avatar_video,
            description=d.CREATE_AVATAR_VIDEO,
            context="creating avatar video",
        )
        .tool(
            "create_advanced_lipsync",
            avatar.create_advanced_lipsync,
            description=d.CREATE_ADVANCED_LIPSYNC,
            context="creating advanced lipsync",
        )
        .tool(
            "create_multi_avatar_conversation",
            avatar.create_multi_avatar_conversation,
            description=d.CREATE_MULTI_AVATAR_CONVERSATION,
            context="creating multi-avatar conversation",
        )
        .tool(
            "create_custom_avatar",
            avatar.create_custom_avatar,
            description=d.CREATE_CUSTOM_AVATAR,
            context="creating custom avatar",
        )
        # ==================== VIDEO TOOLS ====================
        .tool(
            "create_url_to_video",
            video.create_url_to_video,
            description=d.CREATE_URL_TO_VIDEO,
            context="creating URL to video",
        )
        .tool(
            "create_custom_template_video",
            video.create_custom_template_video,
            description=d.CREATE_CUSTOM_TEMPLATE_VIDEO,
            context="creating custom template video",
        )
        .tool(
            "create_ai_edited_video",
            video.create_ai_edited_video,
            description=d.CREATE_AI_EDITED_VIDEO,
            context="creating AI edited video",
        )
        .tool("create_ai_shorts", video.create_ai_shorts, description=d.CREATE_AI_SHORTS, context="creating AI shorts")
        .tool("get_video_status", video.get_video_status, description=d.GET_VIDEO_STATUS, context="getting video status")
        # ==================== AUDIO / SCRIPT TOOLS ====================
        .tool(
            "generate_text_to_speech",
            audio.generate_text_to_speech,
            description=d.GENERATE_TEXT_TO_SPEECH,
            context="generating text-to-speech",
        )
        .tool(
            "generate_ai_script",
            audio.generate_ai_script,
            description=d.GENERATE_AI_SCRIPT,
            context="generating AI script",
        )
        # ==================== OTHER TOOLS ====================
        .tool("manage_music", music.manage_music, description=d.MANAGE_MUSIC, context="managing music")
        .tool("how_to_use", usage.how_to_use, description=d.HOW_TO_USE, context="getting usage information")
        # ==================== RESOURCES ====================
        .resource("creatify://avatars", resources.get_avatars, name="avatars", description=d.AVATARS)
        .resource("creatify://voices", resources.get_voices, name="voices", description=d.VOICES)
        .resource("creatify://templates", resources.get_templates, name="templates", description=d.TEMPLATES)
        .resource("creatify://credits", resources.get_credits, name="credits", description=d.CREDITS)
        .resource("creatify://music", resources.get_music, name="music", description=d.MUSIC)
        .resource(
            "creatify://avatar/{avatar_id}",
            resources.get_avatar,
            name="avatar-details",
            description=d.AVATAR_DETAILS,
        )
        .build()
    )


def create_server() -> FastMCP:
    """Create a FastMCP server with every tool and resource installed."""
    return build_registry().install(FastMCP("creatify-mcp"))


# ==================== SERVER ENTRYPOINT ====================
def main():
    """Run the MCP server over stdio.

    Credentials are checked before anything is served; missing credentials
    end the process with exit status 1.
    """
    load_dotenv()  # Load environment variables at runtime
    try:
        get_credentials()
    except RuntimeError as e:
        logger.error("Cannot start Creatify MCP server: %s", e)
        sys.exit(1)

    logger.info("Starting Creatify MCP server over stdio")
    create_server().run()


if __name__ == "__main__":
    main()
