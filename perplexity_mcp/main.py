"""perplexity_mcp.main

FastAPI entrypoint for the SSE transport.

Endpoints:
  - GET  /sse                          push channel, one MCP session per client
  - POST /messages/?session_id=<id>    pull channel, routed to that session
  - GET  /api/v1/health
"""

from __future__ import annotations

from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport

from perplexity_mcp.config.settings import ServerConfig, settings
from perplexity_mcp.mcp.server import initialization_options
from perplexity_mcp.utils.logger import get_logger

logger = get_logger(__name__)

MESSAGES_PATH = "/messages/"


def create_app(server: Server, config: ServerConfig) -> FastAPI:
    # Sessions are keyed by the session_id handed to each client in its
    # `endpoint` event, so concurrent clients never share a stream.
    sse = SseServerTransport(MESSAGES_PATH)

    app = FastAPI(
        title="Perplexity Search MCP Server",
        version=settings.service_version,
    )

    async def handle_sse(request: Request) -> Response:
        logger.info(f"SSE client connected from {request.client.host if request.client else '-'}")
        async with sse.connect_sse(request.scope, request.receive, request._send) as (
            read_stream,
            write_stream,
        ):
            await server.run(read_stream, write_stream, initialization_options(server))
        logger.info("SSE client disconnected")
        return Response()

    app.add_route("/sse", handle_sse, methods=["GET"])
    app.mount(MESSAGES_PATH.rstrip("/"), app=sse.handle_post_message)

    @app.get("/api/v1/health")
    async def health():
        return {
            "status": "healthy",
            "version": settings.service_version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {
                "perplexity_api_key": "configured" if bool(config.api_key) else "not_configured",
                "model": config.model,
            },
        }

    return app


class SSEServer(uvicorn.Server):
    """uvicorn server that announces readiness once its sockets are bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits the process itself when binding fails.
        if self.started:
            logger.info(
                "Perplexity Search MCP server running on SSE at "
                f"http://{self.config.host}:{self.config.port}/sse"
            )


def build_http_server(server: Server, config: ServerConfig, host: str, port: int) -> SSEServer:
    app = create_app(server, config)
    return SSEServer(
        uvicorn.Config(
            app,
            host=host,
            port=port,
            log_level=settings.log_level.lower(),
            timeout_graceful_shutdown=5,
        )
    )


def run_http(server: Server, config: ServerConfig, host: str, port: int) -> None:
    build_http_server(server, config, host, port).run()
