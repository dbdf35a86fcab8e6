"""tools/call handling for the `search` tool."""

from __future__ import annotations

from typing import Any

import mcp.types as types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from perplexity_mcp.clients.perplexity import PerplexityAPIError, PerplexityClient
from perplexity_mcp.mcp.tools import is_known_tool
from perplexity_mcp.models.search import SearchRequest
from perplexity_mcp.utils.logger import get_logger

logger = get_logger(__name__)

ERROR_PREFIX = "Perplexity API error"


def _text_result(text: str, *, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def _parse_arguments(name: str, arguments: Any) -> SearchRequest:
    try:
        return SearchRequest.model_validate(arguments if arguments is not None else {})
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise McpError(
            types.ErrorData(
                code=types.INVALID_PARAMS,
                message=f"Invalid arguments for tool '{name}': {details}",
            )
        ) from e


async def call_tool(
    name: str,
    arguments: dict[str, Any] | None,
    client: PerplexityClient,
) -> types.CallToolResult:
    """
    Run one tool invocation.

    Unknown tools and invalid arguments raise McpError (a JSON-RPC error for that
    request only). Upstream failures come back as an isError result so the
    calling agent sees a readable message. Anything else propagates.
    """
    if not is_known_tool(name):
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )

    # `search` is the only registered tool.
    request = _parse_arguments(name, arguments)

    try:
        result = await client.search(request)
    except PerplexityAPIError as e:
        logger.warning(f"Search failed (status={e.status_code}): {e.message}")
        return _text_result(f"{ERROR_PREFIX}: {e.message}", is_error=True)

    return _text_result(result.model_dump_json(indent=2))
