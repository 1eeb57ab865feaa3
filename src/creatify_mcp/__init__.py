# SPDX-License-Identifier: MIT
"""MCP server exposing the Creatify video generation API as tools and resources."""

__version__ = "1.0.0"
