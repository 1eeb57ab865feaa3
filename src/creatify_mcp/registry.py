# SPDX-License-Identifier: MIT
"""Declarative table of tools and resources served by the MCP server.

The table is assembled with :class:`RegistryBuilder`, frozen into a
:class:`Registry`, and only then bound onto a ``FastMCP`` instance. Nothing is
registered as an import side effect.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from mcp.server.fastmcp import FastMCP

from .formatting import tool_boundary

ToolHandler = Callable[..., Awaitable[Any]]
ResourceFetch = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class ToolSpec:
    """A tool: its argument schema is the handler's signature."""

    name: str
    description: str
    handler: ToolHandler
    context: str


@dataclass(frozen=True)
class ResourceSpec:
    """A resource URI (optionally templated with one ``{param}``) and its fetch function."""

    uri: str
    name: str
    description: str
    fetch: ResourceFetch
    mime_type: str = "application/json"


@dataclass(frozen=True)
class Registry:
    tools: Mapping[str, ToolSpec]
    resources: Mapping[str, ResourceSpec]

    def install(self, mcp: FastMCP) -> FastMCP:
        """Bind every tool and resource onto ``mcp``."""
        for spec in self.tools.values():
            mcp.add_tool(
                tool_boundary(spec.context)(spec.handler),
                name=spec.name,
                description=spec.description,
                structured_output=False,
            )
        for spec in self.resources.values():
            mcp.resource(spec.uri, name=spec.name, description=spec.description, mime_type=spec.mime_type)(
                spec.fetch
            )
        return mcp


class RegistryBuilder:
    """Collects tool and resource specs, rejecting duplicates."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}
        self._resources: dict[str, ResourceSpec] = {}

    def tool(self, name: str, handler: ToolHandler, *, description: str, context: str) -> RegistryBuilder:
        if name in self._tools:
            raise ValueError(f"Duplicate tool name: {name}")
        self._tools[name] = ToolSpec(name=name, description=description, handler=handler, context=context)
        return self

    def resource(self, uri: str, fetch: ResourceFetch, *, name: str, description: str) -> RegistryBuilder:
        if uri in self._resources:
            raise ValueError(f"Duplicate resource URI: {uri}")
        self._resources[uri] = ResourceSpec(uri=uri, name=name, description=description, fetch=fetch)
        return self

    def build(self) -> Registry:
        return Registry(tools=MappingProxyType(dict(self._tools)), resources=MappingProxyType(dict(self._resources)))
