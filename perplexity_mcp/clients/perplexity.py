"""
Perplexity chat/completions client (the search gateway)
"""
from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from perplexity_mcp.config.settings import ServerConfig
from perplexity_mcp.models.search import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    SearchRequest,
    SearchResult,
)
from perplexity_mcp.utils.logger import get_logger

logger = get_logger(__name__)


class PerplexityAPIError(Exception):
    """A failed or unusable call to the Perplexity API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PerplexityClient:
    """
    Issues one chat/completions POST per search.

    No retries are made. The request is bounded by `config.timeout`.
    """

    def __init__(
        self,
        config: ServerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    def build_payload(self, request: SearchRequest) -> dict[str, Any]:
        payload = ChatCompletionRequest(
            model=self.config.model,
            messages=[ChatMessage(role="user", content=request.query)],
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            search_recency_filter=request.search_recency_filter,
        )
        return payload.model_dump(mode="json", exclude_none=True)

    async def search(self, request: SearchRequest) -> SearchResult:
        """
        Run a search and keep only the answer text and its citations.

        Raises:
            PerplexityAPIError: on transport failure, a non-2xx status, or a
                success body that does not carry an answer.
        """
        payload = self.build_payload(request)
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(
            f"Using model: {self.config.model}, max_tokens: {self.config.max_tokens}, "
            f"temperature: {self.config.temperature}"
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.config.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise PerplexityAPIError(str(e) or e.__class__.__name__) from e

        if response.is_error:
            raise PerplexityAPIError(
                _error_message(response), status_code=response.status_code
            )

        try:
            data = ChatCompletionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.debug(f"Response text: {response.text[:500]}")
            raise PerplexityAPIError(
                "malformed upstream response", status_code=response.status_code
            ) from e

        if not data.choices:
            raise PerplexityAPIError("empty upstream response", status_code=response.status_code)

        return SearchResult(
            content=data.choices[0].message.content,
            citations=data.citations or [],
        )


def _error_message(response: httpx.Response) -> str:
    """Prefer the upstream `error`, then `message`, then the status line."""
    fallback = f"Request failed with status code {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return fallback

    if not isinstance(data, dict):
        return fallback

    error = data.get("error")
    if isinstance(error, dict):
        # OpenAI-style {"error": {"message": ..., "type": ...}}
        error = error.get("message") or error.get("type")
    if error:
        return str(error)

    message = data.get("message")
    if message:
        return str(message)

    return fallback
