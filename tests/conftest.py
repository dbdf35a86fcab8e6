"""
Pytest configuration and fixtures for the Perplexity MCP server tests.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from perplexity_mcp.clients.perplexity import PerplexityClient
from perplexity_mcp.config.settings import ServerConfig


class UpstreamStub:
    """Records outbound requests and answers them with a canned response."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(
        model="sonar",
        api_key="test-key",
        api_url="https://api.perplexity.ai/chat/completions",
        timeout=5.0,
    )


@pytest.fixture
def success_body() -> Dict[str, Any]:
    return {
        "id": "cmpl-1",
        "model": "sonar",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": "Paris"}}],
        "citations": ["https://a"],
    }


@pytest.fixture
def make_upstream():
    """Factory: make_upstream(status, json=..., text=...) -> UpstreamStub"""

    def _make(status_code: int = 200, **response_kwargs) -> UpstreamStub:
        return UpstreamStub(lambda request: httpx.Response(status_code, **response_kwargs))

    return _make


@pytest.fixture
def make_client(server_config):
    """Factory: make_client(upstream) -> PerplexityClient routed through the stub"""

    def _make(upstream: Callable[[httpx.Request], httpx.Response]) -> PerplexityClient:
        return PerplexityClient(server_config, transport=httpx.MockTransport(upstream))

    return _make
