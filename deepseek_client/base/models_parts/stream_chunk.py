"""
Streamed chat completion chunk DTOs.

Each SSE frame decodes to one :class:`ChatCompletionChunk`. Deltas are
partially populated: the first usually carries only the role, later ones
content fragments, the last a finish reason (and, for some deployments, the
usage totals on a choice-less chunk).
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .chat_response import Usage
from .message import FunctionCallDelta, ToolCallDelta


class Delta(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    reasoning_content: Optional[str] = None
    function_call: Optional[FunctionCallDelta] = None
    tool_calls: Optional[List[ToolCallDelta]] = None


class StreamChoice(BaseModel):
    index: int = 0
    delta: Delta = Field(default_factory=Delta)
    finish_reason: Optional[str] = None


class ChatCompletionChunk(BaseModel):
    id: str = ""
    object: str = "chat.completion.chunk"
    created: int = 0
    model: str = ""
    system_fingerprint: Optional[str] = None
    choices: List[StreamChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None

    @property
    def finished(self) -> bool:
        """True when any choice carries a finish reason (informational only)."""
        return any(c.finish_reason for c in self.choices)


__all__ = ["Delta", "StreamChoice", "ChatCompletionChunk"]
