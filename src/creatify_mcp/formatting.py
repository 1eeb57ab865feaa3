# SPDX-License-Identifier: MIT
"""Conversion of handler outcomes into MCP tool results.

Tool failures are reported inside a normal tool response flagged with
``isError`` so the calling agent can read the message. Resource reads have no
such flag, so resource errors are left to propagate.
"""

import functools
import json
from collections.abc import Awaitable, Callable
from typing import Any, Literal, ParamSpec

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, ConfigDict

from .config import logger

P = ParamSpec("P")


class TextSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Outcome of one tool invocation."""

    model_config = ConfigDict(frozen=True)

    content: tuple[TextSegment, ...]
    is_error: bool = False

    @property
    def success(self) -> bool:
        # Failures still travel as a successful protocol response
        return True

    @property
    def text(self) -> str:
        return "\n".join(segment.text for segment in self.content)

    def to_mcp(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=segment.text) for segment in self.content],
            isError=self.is_error,
        )


def _to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    return payload


def dump_json(payload: Any) -> str:
    """Pretty-print a payload as JSON (2-space indent)."""
    return json.dumps(_to_jsonable(payload), indent=2, ensure_ascii=False, default=str)


def format_success(payload: Any) -> ToolResult:
    return ToolResult(content=(TextSegment(text=dump_json(payload)),))


def format_text(text: str) -> ToolResult:
    return ToolResult(content=(TextSegment(text=text),))


def error_message(exc: BaseException) -> str:
    """Message of an exception, falling back to its class name when empty."""
    return str(exc) or type(exc).__name__


def format_error(context: str, exc: BaseException) -> ToolResult:
    """Build an error result reading ``Error <context>: <message>``."""
    return ToolResult(content=(TextSegment(text=f"Error {context}: {error_message(exc)}"),), is_error=True)


def tool_boundary(
    context: str,
) -> Callable[[Callable[P, Awaitable[Any]]], Callable[P, Awaitable[CallToolResult]]]:
    """Run a tool handler inside a failure boundary.

    The wrapped handler's return value is serialized with :func:`format_success`
    (or passed through if it already is a :class:`ToolResult`); any exception
    becomes a :func:`format_error` result. The handler's signature is kept so
    FastMCP can derive the tool's argument schema from it.

    Args:
        context: Short phrase naming the operation, e.g. ``"creating avatar video"``
    """

    def decorator(handler: Callable[P, Awaitable[Any]]) -> Callable[P, Awaitable[CallToolResult]]:
        @functools.wraps(handler)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> CallToolResult:
            try:
                outcome = await handler(*args, **kwargs)
            except Exception as e:
                logger.exception("Tool %s failed", handler.__name__)
                return format_error(context, e).to_mcp()
            result = outcome if isinstance(outcome, ToolResult) else format_success(outcome)
            return result.to_mcp()

        wrapper.__annotations__ = {**handler.__annotations__, "return": CallToolResult}
        return wrapper

    return decorator


def json_resource(payload: Any) -> str:
    """Body of an ``application/json`` resource read."""
    return dump_json(payload)
