# SPDX-License-Identifier: MIT
"""The how_to_use introspection tool."""

from ..errors import NotFoundError
from ..formatting import ToolResult, format_text
from ..guides import TOOL_GUIDES, render_guide


async def how_to_use(tool_name: str, include_examples: bool = True) -> ToolResult:
    """Return Markdown usage documentation for another tool.

    Raises:
        NotFoundError: If no guide exists for ``tool_name``
    """
    guide = TOOL_GUIDES.get(tool_name)
    if guide is None:
        raise NotFoundError(f"Tool '{tool_name}' not found. Available tools: {', '.join(TOOL_GUIDES)}")
    return format_text(render_guide(tool_name, guide, include_examples=include_examples))
