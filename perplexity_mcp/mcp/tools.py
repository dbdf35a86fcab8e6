"""Tool manifest advertised by tools/list."""

from __future__ import annotations

import mcp.types as types

from perplexity_mcp.models.search import RecencyFilter

SEARCH_TOOL_NAME = "search"

SEARCH_TOOL = types.Tool(
    name=SEARCH_TOOL_NAME,
    description=(
        "Perform a web search using Perplexity's API, which provides detailed and "
        "contextually relevant results with citations. By default, no time filtering "
        "is applied to search results."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "The search query to perform",
            },
            "search_recency_filter": {
                "type": "string",
                "description": (
                    "Filter search results by recency (options: month, week, day, hour). "
                    "If not specified, no time filtering is applied."
                ),
                "enum": [f.value for f in RecencyFilter],
            },
        },
        "required": ["query"],
    },
)

_TOOLS: tuple[types.Tool, ...] = (SEARCH_TOOL,)


def list_tools() -> list[types.Tool]:
    return list(_TOOLS)


def is_known_tool(name: str) -> bool:
    return any(tool.name == name for tool in _TOOLS)
