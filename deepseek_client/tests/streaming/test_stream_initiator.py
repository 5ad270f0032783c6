"""Opening chat and completion streams through the client."""
from __future__ import annotations

import httpx
import pytest

from deepseek_client import (
    CancellationToken,
    ChatCompletionRequest,
    ChatCompletionStream,
    CompletionRequest,
    CompletionStream,
    DeepseekError,
    ErrorCode,
    Message,
)
from deepseek_client.tests.helpers import error_envelope, json_response, sse_response, text_response

REQ = ChatCompletionRequest(messages=[Message.user("hi")])


def test_stream_forces_stream_flag_on_a_copy(make_client):
    client, rec = make_client([sse_response(b'data: {"choices":[{"delta":{"content":"Hi"}}]}\n', b"data: [DONE]\n")])
    request = ChatCompletionRequest(messages=[Message.user("hi")], stream=False)
    with client.create_chat_completion_stream(request) as stream:
        assert isinstance(stream, ChatCompletionStream)
        assert stream.receive().choices[0].delta.content == "Hi"
        assert stream.receive() is None
    body = rec.json_body()
    assert body["stream"] is True
    assert body["model"] == "deepseek-chat"
    assert request.stream is False
    assert rec.requests[0].headers["Accept"] == "text/event-stream"


@pytest.mark.parametrize("request_,param", [(None, "request"), (ChatCompletionRequest(), "messages")])
def test_invalid_stream_request_makes_no_call(make_client, request_, param):
    client, rec = make_client([sse_response(b"data: [DONE]\n")])
    with pytest.raises(DeepseekError) as ei:
        client.create_chat_completion_stream(request_)
    assert ei.value.code is ErrorCode.INVALID_REQUEST
    assert ei.value.param == param
    assert rec.calls == 0


def test_error_status_is_mapped_and_not_retried(make_client, no_sleep):
    client, rec = make_client([json_response(429, error_envelope("slow down"), headers={"Retry-After": "3"})])
    with pytest.raises(DeepseekError) as ei:
        client.create_chat_completion_stream(REQ)
    assert ei.value.code is ErrorCode.RATE_LIMIT
    assert ei.value.retry_after == 3.0
    assert rec.calls == 1
    assert no_sleep == []


def test_model_not_found_on_stream_open(make_client):
    client, _ = make_client(
        [json_response(404, error_envelope("unknown model", type_="model_not_found", param="deepseek-x"))]
    )
    with pytest.raises(DeepseekError) as ei:
        client.create_chat_completion_stream(ChatCompletionRequest(model="deepseek-x", messages=[Message.user("hi")]))
    assert ei.value.code is ErrorCode.MODEL_NOT_FOUND
    assert ei.value.model == "deepseek-x"


def test_undecodable_error_body_keeps_status_and_text(make_client):
    client, _ = make_client([text_response(500, "internal oops")])
    with pytest.raises(DeepseekError) as ei:
        client.create_chat_completion_stream(REQ)
    assert ei.value.code is ErrorCode.ERROR_RESPONSE_DECODE
    assert ei.value.status_code == 500
    assert ei.value.body == "internal oops"


def test_transport_failure_opening_stream_is_not_retried(make_client, no_sleep):
    client, rec = make_client([httpx.ConnectError("refused")])
    with pytest.raises(DeepseekError) as ei:
        client.create_chat_completion_stream(REQ)
    assert ei.value.code is ErrorCode.TRANSPORT
    assert rec.calls == 1
    assert no_sleep == []


def test_cancelled_before_open_makes_no_call(make_client):
    client, rec = make_client([sse_response(b"data: [DONE]\n")])
    token = CancellationToken()
    token.cancel()
    with pytest.raises(DeepseekError) as ei:
        client.create_chat_completion_stream(REQ, cancel=token)
    assert ei.value.code is ErrorCode.CANCELLED
    assert rec.calls == 0


def test_completion_stream(make_client):
    client, rec = make_client(
        [sse_response(b'data: {"choices":[{"text":"a"}]}\n\n', b'data: {"choices":[{"text":"b"}]}\n\n', b"data: [DONE]\n\n")]
    )
    stream = client.create_completion_stream(CompletionRequest(prompt="x"))
    assert isinstance(stream, CompletionStream)
    assert [c.choices[0].text for c in stream] == ["a", "b"]
    assert rec.json_body()["model"] == "deepseek-coder"
    assert rec.json_body()["stream"] is True
    assert rec.requests[0].url.path == "/completions"


def test_completion_stream_requires_prompt(make_client):
    client, rec = make_client([sse_response(b"data: [DONE]\n")])
    with pytest.raises(DeepseekError) as ei:
        client.create_completion_stream(CompletionRequest())
    assert ei.value.param == "prompt"
    assert rec.calls == 0
