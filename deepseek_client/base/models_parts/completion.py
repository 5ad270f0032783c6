"""
Text completion (``POST /completions``) DTOs, streamed and non-streamed.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .chat_response import Usage


class CompletionRequest(BaseModel):
    """Request body for the text completion endpoint (FIM via ``suffix``)."""

    model: str = ""
    prompt: str = ""
    suffix: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    echo: Optional[bool] = None
    stream: Optional[bool] = None

    def prepared(self, default_model: str, *, stream: Optional[bool] = None) -> "CompletionRequest":
        update: Dict[str, Any] = {}
        if not self.model:
            update["model"] = default_model
        if stream is not None:
            update["stream"] = stream
        return self.model_copy(update=update) if update else self

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CompletionChoice(BaseModel):
    index: int = 0
    text: str = ""
    finish_reason: Optional[str] = None


class CompletionResponse(BaseModel):
    id: str = ""
    object: str = "text_completion"
    created: int = 0
    model: str = ""
    choices: List[CompletionChoice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)


class CompletionChunk(BaseModel):
    """One streamed text completion frame; choices carry text fragments."""

    id: str = ""
    object: str = "text_completion"
    created: int = 0
    model: str = ""
    choices: List[CompletionChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None


__all__ = [
    "CompletionRequest",
    "CompletionChoice",
    "CompletionResponse",
    "CompletionChunk",
]
