"""
Tokenizer endpoint DTOs.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class TokenCountDetails(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    truncated: bool = False


class TokenCount(BaseModel):
    total_tokens: int = 0
    details: TokenCountDetails = Field(default_factory=TokenCountDetails)


class Tokenization(BaseModel):
    tokens: List[str] = Field(default_factory=list)
    token_ids: List[int] = Field(default_factory=list)


__all__ = ["TokenCountDetails", "TokenCount", "Tokenization"]
