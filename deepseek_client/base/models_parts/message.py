"""
Message DTO and the function/tool-call payload variants.

The wire format lets ``function_call`` be a complete call on a message, a
partial fragment on a streamed delta, or absent. Each shape is its own model
and the right one is chosen at decode time by the field's declared type:
``Message.function_call`` is a :class:`FunctionCall`, ``Delta.function_call``
a :class:`FunctionCallDelta`. Arguments stay raw JSON text; object-shaped
arguments are serialized back to text so callers always see one type.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Role(str, Enum):
    """Chat message author roles."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"


def _raw_arguments(value: Any) -> Any:
    """Return function arguments as raw JSON text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class FunctionCall(BaseModel):
    """A complete function call: name plus the opaque raw argument payload."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: str = ""

    @field_validator("arguments", mode="before")
    @classmethod
    def coerce_arguments(cls, value: Any) -> Any:
        return _raw_arguments(value)

    def parsed_arguments(self) -> Any:
        """Decode ``arguments`` as JSON (raises ``json.JSONDecodeError``)."""
        return json.loads(self.arguments) if self.arguments else {}


class FunctionCallDelta(BaseModel):
    """A streamed fragment of a function call; the name arrives once."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    arguments: str = ""

    @field_validator("arguments", mode="before")
    @classmethod
    def coerce_arguments(cls, value: Any) -> Any:
        return _raw_arguments(value)


class ToolCall(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "function"
    function: FunctionCall


class ToolCallDelta(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = 0
    id: Optional[str] = None
    type: Optional[str] = None
    function: Optional[FunctionCallDelta] = None


class Message(BaseModel):
    """A chat message. Immutable once constructed.

    Attributes:
        role: The author role.
        content: Text content; ``None`` for assistant messages that only
            carry a function/tool call.
        name: Optional author name (function name for ``function`` role).
        function_call: Complete function call requested by the assistant.
        tool_calls: Complete tool calls requested by the assistant.
        tool_call_id: Tool call answered by a ``tool`` role message.
        reasoning_content: Reasoning trace returned by reasoning models.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role
    content: Optional[str] = ""
    name: Optional[str] = None
    function_call: Optional[FunctionCall] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None
    reasoning_content: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)

    def to_payload(self) -> dict:
        """Return the request wire shape (unset optional fields dropped)."""
        return self.model_dump(exclude_none=True, exclude={"reasoning_content"})


__all__ = [
    "Role",
    "FunctionCall",
    "FunctionCallDelta",
    "ToolCall",
    "ToolCallDelta",
    "Message",
]
