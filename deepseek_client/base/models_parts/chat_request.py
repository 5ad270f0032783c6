"""
ChatCompletionRequest DTO and the function/tool declarations it carries.

The request is a value object built fresh per call. The client never mutates
a caller's instance: defaults and the forced streaming flag are applied to a
copy via :meth:`ChatCompletionRequest.prepared`.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .message import Message


class FunctionDefinition(BaseModel):
    """A function the model may call (``parameters`` is a JSON schema)."""

    name: str
    description: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)


class Tool(BaseModel):
    type: str = "function"
    function: FunctionDefinition


class ResponseFormat(BaseModel):
    """Output format hint, e.g. ``{"type": "json_object"}``."""

    type: str = "text"


class ChatCompletionRequest(BaseModel):
    """Request body for ``POST /chat/completions``.

    Attributes:
        model: Target model; the client default applies when empty.
        messages: Ordered conversation; must be non-empty.
        stream: Forced to ``True`` by the streaming entry point.

    The remaining attributes are optional sampling and function-calling
    controls passed through verbatim; ``None`` values are omitted from the
    wire payload.
    """

    model: str = ""
    messages: List[Message] = Field(default_factory=list)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    max_tokens: Optional[int] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None
    seed: Optional[int] = None
    functions: Optional[List[FunctionDefinition]] = None
    function_call: Optional[Union[str, Dict[str, Any]]] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    response_format: Optional[ResponseFormat] = None
    stream: Optional[bool] = None

    def prepared(self, default_model: str, *, stream: Optional[bool] = None) -> "ChatCompletionRequest":
        """Return a copy with the default model applied and ``stream`` forced when given."""
        update: Dict[str, Any] = {}
        if not self.model:
            update["model"] = default_model
        if stream is not None:
            update["stream"] = stream
        return self.model_copy(update=update) if update else self

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-serializable wire body."""
        payload = self.model_dump(exclude_none=True, exclude={"messages"})
        payload["messages"] = [m.to_payload() for m in self.messages]
        return payload


__all__ = [
    "FunctionDefinition",
    "Tool",
    "ResponseFormat",
    "ChatCompletionRequest",
]
