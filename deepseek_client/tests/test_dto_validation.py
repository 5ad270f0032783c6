"""Wire DTO decoding rules."""
from __future__ import annotations

import pydantic
import pytest

from deepseek_client import ChatCompletionChunk, ChatCompletionRequest, ChatCompletionResponse, FunctionCall, Message, Role
from deepseek_client.base.models import APIErrorEnvelope, FunctionCallDelta


def test_message_is_frozen():
    msg = Message.user("hi")
    with pytest.raises(pydantic.ValidationError):
        msg.content = "changed"  # type: ignore[misc]


def test_message_roles_serialize_as_strings():
    assert Message(role=Role.TOOL, content="42", tool_call_id="call_1").to_payload() == {
        "role": "tool",
        "content": "42",
        "tool_call_id": "call_1",
    }


def test_reasoning_content_is_not_sent_back():
    msg = Message(role="assistant", content="answer", reasoning_content="thinking")
    assert "reasoning_content" not in msg.to_payload()


def test_function_call_variants():
    full = FunctionCall.model_validate({"name": "f", "arguments": {"x": 1}})
    assert full.arguments == '{"x": 1}'
    assert FunctionCall(name="f", arguments=None).arguments == ""  # type: ignore[arg-type]

    chunk = ChatCompletionChunk.model_validate(
        {"choices": [{"delta": {"function_call": {"arguments": '{"x"'}}}]}
    )
    delta_call = chunk.choices[0].delta.function_call
    assert isinstance(delta_call, FunctionCallDelta)
    assert delta_call.name is None
    assert delta_call.arguments == '{"x"'

    plain = ChatCompletionChunk.model_validate({"choices": [{"delta": {"content": "x"}}]})
    assert plain.choices[0].delta.function_call is None


def test_unknown_response_fields_are_ignored():
    resp = ChatCompletionResponse.model_validate(
        {
            "id": "x",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": "ok", "refusal": None}, "logprobs": None}],
            "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2, "prompt_cache_hit_tokens": 1},
            "brand_new_field": True,
        }
    )
    assert resp.content == "ok"
    assert resp.usage.prompt_cache_hit_tokens == 1


def test_prepared_returns_copy():
    req = ChatCompletionRequest(model="m", messages=[Message.user("a")])
    same = req.prepared("default")
    assert same is req
    streaming = req.prepared("default", stream=True)
    assert streaming is not req
    assert streaming.stream is True and req.stream is None


def test_error_envelope_shapes():
    assert APIErrorEnvelope.model_validate({"error": {"message": "m", "param": "p"}}).param == "p"
    assert APIErrorEnvelope.model_validate({"message": "m", "type": "t"}).type == "t"
    with pytest.raises(pydantic.ValidationError):
        APIErrorEnvelope.model_validate(["not", "an", "object"])
