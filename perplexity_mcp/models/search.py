"""
Search request/result models and the Perplexity chat/completions wire shapes
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class RecencyFilter(str, Enum):
    month = "month"
    week = "week"
    day = "day"
    hour = "hour"


class SearchRequest(BaseModel):
    """Arguments of the `search` tool, validated from untrusted caller input."""

    model_config = ConfigDict(extra="ignore")

    query: StrictStr = Field(..., min_length=1, description="The search query to perform")
    search_recency_filter: Optional[RecencyFilter] = Field(
        default=None,
        description="Restrict results to this recency window; no filtering when absent",
    )

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        # The raw text is forwarded unchanged; only blank queries are rejected.
        if not value.strip():
            raise ValueError("query must not be blank")
        return value


class SearchResult(BaseModel):
    content: str
    citations: list[str] = Field(default_factory=list)


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"] = "user"
    content: str


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
    max_tokens: int
    temperature: float
    search_recency_filter: Optional[RecencyFilter] = None


class ChoiceMessage(BaseModel):
    content: str


class Choice(BaseModel):
    message: ChoiceMessage


class ChatCompletionResponse(BaseModel):
    """The subset of the upstream success body this server reads."""

    choices: list[Choice]
    citations: Optional[list[str]] = None
