"""Extract JSON payloads from model replies.

Models asked for JSON often wrap it in Markdown fences or add a sentence
before it. :func:`extract_json_content` isolates the first complete JSON
object or array; :func:`extract_json` decodes it and optionally validates it
into a pydantic model.
"""
from __future__ import annotations

import json
import re
from typing import Any, Optional, Type, TypeVar, Union, overload

from pydantic import BaseModel, ValidationError

from ..errors import DeepseekError, ErrorCode, invalid_request
from ..models import ChatCompletionResponse

M = TypeVar("M", bound=BaseModel)

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*(.*?)\s*```", re.DOTALL)
_DECODER = json.JSONDecoder()


def _clean_json_markers(s: str) -> str:
    """Return the body of the first fenced code block, or ``s`` trimmed."""
    s = s.strip()
    match = _FENCE_RE.search(s)
    if match:
        return match.group(1).strip()
    return s


def extract_json_content(text: str) -> str:
    """Return the first complete JSON object/array in ``text``, or ``""``."""
    s = _clean_json_markers(text)
    for start, ch in enumerate(s):
        if ch not in "{[":
            continue
        try:
            _, end = _DECODER.raw_decode(s, start)
        except ValueError:
            continue
        return s[start:end]
    return ""


def _content_of(source: Union[ChatCompletionResponse, str, None]) -> str:
    if source is None:
        raise invalid_request("response", "response is required")
    if isinstance(source, str):
        return source
    if not source.choices:
        raise invalid_request("response", "response has no choices")
    return source.choices[0].message.content or ""


@overload
def extract_json(source: Union[ChatCompletionResponse, str, None]) -> Any: ...


@overload
def extract_json(source: Union[ChatCompletionResponse, str, None], model_type: Type[M]) -> M: ...


def extract_json(
    source: Union[ChatCompletionResponse, str, None],
    model_type: Optional[Type[M]] = None,
) -> Any:
    """Decode the JSON carried by a chat response (or raw reply text).

    Raises:
        DeepseekError: ``INVALID_REQUEST`` for a missing response or one
            without choices; ``RESPONSE_DECODE`` when no JSON can be found,
            it does not parse, or it fails ``model_type`` validation.
    """
    content = _content_of(source)
    payload = extract_json_content(content)
    if not payload:
        raise DeepseekError(
            code=ErrorCode.RESPONSE_DECODE,
            message="no JSON content found in response",
            body=content,
        )
    try:
        data = json.loads(payload)
    except ValueError as e:  # pragma: no cover - raw_decode already accepted it
        raise DeepseekError(
            code=ErrorCode.RESPONSE_DECODE,
            message=f"failed to parse JSON content: {e}",
            body=payload,
            raw=e,
        ) from e
    if model_type is None:
        return data
    try:
        return model_type.model_validate(data)
    except ValidationError as e:
        raise DeepseekError(
            code=ErrorCode.RESPONSE_DECODE,
            message=f"JSON content does not match {model_type.__name__}: {e}",
            body=payload,
            raw=e,
        ) from e


__all__ = ["extract_json", "extract_json_content"]
