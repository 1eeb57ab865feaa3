# SPDX-License-Identifier: MIT
"""Tool handlers for the Creatify MCP server, organized by category:
- avatar: lip-sync videos, multi-avatar conversations, custom avatars
- video: URL-to-video, templates, AI editing, AI shorts, job status
- audio: text-to-speech and AI scripts
- music: background music library
- usage: how_to_use usage guides

Handlers are plain async functions; server.build_registry() wires them to MCP.
"""
