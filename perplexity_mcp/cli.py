"""
Command-line entrypoint: validate configuration, then bind one transport.

    perplexity-mcp --model sonar                      # stdio
    perplexity-mcp --transport sse --port 3001        # SSE + POST messages
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from perplexity_mcp.clients.perplexity import PerplexityClient
from perplexity_mcp.config.settings import (
    PERPLEXITY_MODELS,
    TRANSPORT_TYPES,
    ServerConfig,
    settings,
)
from perplexity_mcp.main import run_http
from perplexity_mcp.mcp.server import create_server, run_stdio
from perplexity_mcp.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Perplexity search exposed as an MCP tool server")
    p.add_argument(
        "--model",
        choices=PERPLEXITY_MODELS,
        default=settings.perplexity_model,
        help="Perplexity model used for every search",
    )
    p.add_argument(
        "--transport",
        choices=TRANSPORT_TYPES,
        default=settings.mcp_transport,
        help="stdio for a spawning host, sse for HTTP clients",
    )
    p.add_argument("--host", default=settings.mcp_host, help="SSE bind host")
    p.add_argument("--port", type=int, default=settings.port, help="SSE bind port")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    config = ServerConfig.from_settings(settings, model=args.model)
    logger.info(f"Using Perplexity model: {config.model}")
    if not config.api_key:
        logger.warning("PERPLEXITY_API_KEY is not set; searches will be rejected upstream")

    server = create_server(PerplexityClient(config))

    try:
        if args.transport == "sse":
            run_http(server, config, args.host, args.port)
        else:
            run_stdio(server)
    except KeyboardInterrupt:
        logger.info("Shutdown signal received, server stopped")
        return 0
    except Exception:
        logger.exception(f"Fatal error in {args.transport} transport")
        return 1

    return 0
