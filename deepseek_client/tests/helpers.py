"""Shared test doubles: a recording MockTransport handler and response factories."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, List, Union

import httpx

Reply = Union[httpx.Response, BaseException, Callable[[httpx.Request], httpx.Response]]


class Recorder:
    """MockTransport handler replaying ``replies`` in order.

    A reply is an ``httpx.Response``, an exception to raise, or a callable
    building the response from the request. The last reply repeats once the
    queue is drained.
    """

    def __init__(self, replies: Iterable[Reply]) -> None:
        self.replies: List[Reply] = list(replies)
        self.requests: List[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies[min(len(self.requests), len(self.replies)) - 1]
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return reply(request)

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


def json_response(status: int, payload: Any, headers: dict | None = None) -> Callable[[httpx.Request], httpx.Response]:
    """Factory building a fresh response per call (safe to replay on retries)."""

    def build(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload, headers=headers, request=request)

    return build


def text_response(status: int, text: str, content_type: str = "text/plain") -> Callable[[httpx.Request], httpx.Response]:
    def build(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=text, headers={"Content-Type": content_type}, request=request)

    return build


def sse_response(*chunks: bytes, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Streamed response whose body arrives in exactly the given chunks."""

    def build(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status,
            content=iter(chunks),
            headers={"Content-Type": "text/event-stream"},
            request=request,
        )

    return build


def error_envelope(message: str, type_: str = "invalid_request_error", param: str | None = None) -> dict:
    return {"error": {"message": message, "type": type_, "param": param, "code": None}}


def events(records: List[logging.LogRecord]) -> List[dict]:
    """Decode the JSON payloads written by ``log_event``."""
    out = []
    for rec in records:
        try:
            payload = json.loads(rec.getMessage())
        except ValueError:
            continue
        if isinstance(payload, dict):
            out.append(payload)
    return out


CHAT_OK = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "deepseek-chat",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
}
