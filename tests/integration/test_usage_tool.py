# SPDX-License-Identifier: MIT
"""Integration tests for the how_to_use tool."""

import pytest

from creatify_mcp.errors import NotFoundError
from creatify_mcp.guides import TOOL_GUIDES
from creatify_mcp.tools.usage import how_to_use


@pytest.mark.integration
async def test_guide_sections():
    """The guide has every section in Markdown."""
    result = await how_to_use(tool_name="create_avatar_video")

    text = result.text
    assert text.startswith("# create_avatar_video\n")
    assert "## Required Parameters:" in text
    assert "- **avatar_id**:" in text
    assert "## Optional Parameters:" in text
    assert "## Examples:" in text
    assert "```json" in text
    assert "## Tips:" in text
    assert result.is_error is False


@pytest.mark.integration
async def test_examples_can_be_left_out():
    """include_examples=False drops the examples section."""
    text = (await how_to_use(tool_name="create_advanced_lipsync", include_examples=False)).text

    assert "## Examples:" not in text
    assert "## Tips:" in text


@pytest.mark.integration
async def test_unknown_tool_lists_available_tools():
    """Unknown tools raise with the list of known ones."""
    with pytest.raises(NotFoundError) as exc_info:
        await how_to_use(tool_name="make_coffee")

    message = str(exc_info.value)
    assert message.startswith("Tool 'make_coffee' not found. Available tools: ")
    for name in TOOL_GUIDES:
        assert name in message


@pytest.mark.integration
@pytest.mark.parametrize("tool_name", list(TOOL_GUIDES))
async def test_every_guide_renders(tool_name):
    """Every guide renders."""
    text = (await how_to_use(tool_name=tool_name)).text

    assert text.startswith(f"# {tool_name}\n")
    assert "## Required Parameters:" in text
