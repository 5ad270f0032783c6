"""
Non-streaming chat completion response DTOs.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .message import Message


class Usage(BaseModel):
    """Token usage counters reported by the server.

    ``total_tokens`` equals ``prompt_tokens + completion_tokens`` by server
    contract; the client transports the numbers unmodified.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_cache_hit_tokens: Optional[int] = None
    prompt_cache_miss_tokens: Optional[int] = None


class Choice(BaseModel):
    index: int = 0
    message: Message
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    id: str = ""
    object: str = "chat.completion"
    created: int = 0
    model: str = ""
    system_fingerprint: Optional[str] = None
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    @property
    def content(self) -> Optional[str]:
        """Content of the first choice, if any."""
        return self.choices[0].message.content if self.choices else None


__all__ = ["Usage", "Choice", "ChatCompletionResponse"]
