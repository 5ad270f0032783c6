"""ContentAccumulator and collect_full_response."""
from __future__ import annotations

import httpx
import pytest

from deepseek_client import DeepseekError, ErrorCode
from deepseek_client.base.models import ChatCompletionChunk
from deepseek_client.base.streaming import ChatCompletionStream, ContentAccumulator, collect_full_response


def _stream(*chunks: bytes) -> ChatCompletionStream:
    response = httpx.Response(200, content=iter(chunks), request=httpx.Request("POST", "https://api.x.com/chat/completions"))
    return ChatCompletionStream(response)


def test_collect_full_response_concatenates_and_closes():
    stream = _stream(
        b'data: {"choices":[{"delta":{"role":"assistant"}}]}\n',
        b'data: {"choices":[{"delta":{"content":"Hello"}}]}\n',
        b'data: {"choices":[{"delta":{"content":", world"}}]}\n',
        b'data: {"choices":[{"delta":{},"finish_reason":"stop"}]}\n',
        b"data: [DONE]\n",
    )
    assert collect_full_response(stream) == "Hello, world"
    assert stream.response.is_closed


def test_collect_full_response_closes_on_error():
    stream = _stream(b'data: {"choices":[{"delta":{"content":"a"}}]}\n', b"data: garbage\n")
    with pytest.raises(DeepseekError) as ei:
        collect_full_response(stream)
    assert ei.value.code is ErrorCode.STREAM_DECODE
    assert stream.response.is_closed


def test_accumulator_tracks_reasoning_and_finish_reason():
    acc = ContentAccumulator()
    acc.feed(ChatCompletionChunk.model_validate({"choices": [{"delta": {"reasoning_content": "think"}}]}))
    acc.feed(ChatCompletionChunk.model_validate({"choices": [{"delta": {"content": "answer"}}]}))
    acc.feed(ChatCompletionChunk.model_validate({"choices": [{"delta": {}, "finish_reason": "stop"}]}))
    acc.feed(ChatCompletionChunk.model_validate({"choices": []}))
    assert str(acc) == "answer"
    assert acc.reasoning == "think"
    assert acc.finish_reason == "stop"
    acc.reset()
    assert str(acc) == ""
    assert acc.finish_reason is None
