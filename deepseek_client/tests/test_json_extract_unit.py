"""JSON extraction from model replies."""
from __future__ import annotations

import pytest
from pydantic import BaseModel

from deepseek_client import ChatCompletionResponse, DeepseekError, ErrorCode, extract_json
from deepseek_client.base.utils import extract_json_content


class Person(BaseModel):
    name: str
    age: int


def _response(content):
    return ChatCompletionResponse.model_validate(
        {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}
    )


@pytest.mark.parametrize(
    "content,expected",
    [
        ('{"name": "John"}', '{"name": "John"}'),
        ('```json\n{"name": "John"}\n```', '{"name": "John"}'),
        ('```json{"name": "John"}```', '{"name": "John"}'),
        ('```\n{"name": "John"}\n```', '{"name": "John"}'),
        ('Here is the JSON:\n{"name": "John"}', '{"name": "John"}'),
        ('Result: [1, 2, 3] as requested', "[1, 2, 3]"),
        ("not a json", ""),
    ],
)
def test_extract_json_content(content, expected):
    assert extract_json_content(content) == expected  # nosec B101


def test_extract_into_model_from_fenced_reply():
    person = extract_json(_response('```json\n{"name": "John", "age": 30}\n```'), Person)
    assert person == Person(name="John", age=30)  # nosec B101


def test_extract_without_model_returns_plain_data():
    assert extract_json('{"ok": true}') == {"ok": True}  # nosec B101


@pytest.mark.parametrize("source", [None, ChatCompletionResponse()])
def test_missing_response_or_choices_is_invalid_request(source):
    with pytest.raises(DeepseekError) as ei:
        extract_json(source)
    assert ei.value.code is ErrorCode.INVALID_REQUEST  # nosec B101


@pytest.mark.parametrize("content", ["", "not a json", None])
def test_no_json_is_response_decode(content):
    with pytest.raises(DeepseekError) as ei:
        extract_json(_response(content))
    assert ei.value.code is ErrorCode.RESPONSE_DECODE  # nosec B101


def test_schema_mismatch_is_response_decode():
    with pytest.raises(DeepseekError) as ei:
        extract_json(_response('{"name": "John", "age": "old"}'), Person)
    assert ei.value.code is ErrorCode.RESPONSE_DECODE  # nosec B101
    assert ei.value.raw is not None  # nosec B101
