"""Structured logging: formatter, configuration and client events."""

from __future__ import annotations

import io
import json
import logging

import httpx
import pytest

from deepseek_client import ChatCompletionRequest, DeepseekError, Message
from deepseek_client.base.log_support import JsonFormatter, LogContext
from deepseek_client.base.logging import configure_logger, get_logger, log_event
from deepseek_client.tests.helpers import CHAT_OK, error_envelope, events, json_response, sse_response

REQ = ChatCompletionRequest(messages=[Message.user("hi")])


def test_child_loggers_nest_under_base():
    assert get_logger("deepseek.http").parent is get_logger()  # nosec B101
    assert get_logger("custom").name == "deepseek.custom"  # nosec B101


def test_json_formatter_hoists_event_keys() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord("deepseek.t", logging.INFO, __file__, 1, json.dumps({"event": "x", "n": 1}), None, None)
    data = json.loads(formatter.format(record))
    assert data["event"] == "x"  # nosec B101
    assert data["n"] == 1  # nosec B101
    assert data["level"] == "INFO"  # nosec B101
    assert "msg" not in data  # nosec B101

    plain = logging.LogRecord("deepseek.t", logging.WARNING, __file__, 1, "hello %s", ("you",), None)
    assert json.loads(formatter.format(plain))["msg"] == "hello you"  # nosec B101


def test_log_event_drops_none_and_merges_context():
    stream = io.StringIO()
    logger = logging.getLogger("deepseek.test_log_event")
    handler = logging.StreamHandler(stream)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        log_event(logger, "request.start", LogContext(method="GET", path="/models", extra={"x": None}), attempt=None, n=2)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
    payload = json.loads(stream.getvalue().strip())
    assert payload == {"event": "request.start", "method": "GET", "path": "/models", "n": 2}  # nosec B101


def test_configure_logger_file_handler_round_trip(tmp_path):
    path = tmp_path / "logs" / "client.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        log_event(logger, "unit.file", None, level=logging.INFO, ok=True)
        for h in logger.handlers:
            h.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "unit.file"  # nosec B101
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)  # nosec B101


def test_request_events_at_debug_level(make_client, no_sleep, log_capture):
    client, _ = make_client([json_response(503, error_envelope("busy")), json_response(200, CHAT_OK)])
    client.create_chat_completion(REQ)
    names = [e["event"] for e in events(log_capture)]
    assert names == ["request.start", "request.retry", "request.end"]  # nosec B101
    assert all(r.levelno == logging.DEBUG for r in log_capture)  # nosec B101
    retry_event = events(log_capture)[1]
    assert retry_event["status"] == 503  # nosec B101
    assert retry_event["delay"] == 1.0  # nosec B101
    assert retry_event["path"] == "/chat/completions"  # nosec B101


def test_debug_client_lifts_events_to_info(make_client, log_capture):
    client, _ = make_client([json_response(400, error_envelope("bad"))], debug=True)
    with pytest.raises(DeepseekError):
        client.create_chat_completion(REQ)
    payloads = events(log_capture)
    assert [e["event"] for e in payloads] == ["request.start", "request.error"]  # nosec B101
    assert payloads[-1]["error_code"] == "invalid_request"  # nosec B101
    assert all(r.levelno == logging.INFO for r in log_capture)  # nosec B101


def test_stream_events(make_client, log_capture):
    client, _ = make_client([sse_response(b"data: {oops\n", b'data: {"choices":[]}\n', b"data: [DONE]\n")])
    stream = client.create_chat_completion_stream(REQ)
    with pytest.raises(DeepseekError):
        stream.receive()
    list(stream)
    names = [e["event"] for e in events(log_capture)]
    assert names == ["request.start", "stream.open", "stream.decode_error", "stream.end"]  # nosec B101
    assert events(log_capture)[-1]["chunks"] == 1  # nosec B101


def test_stream_transport_failure_logs_error_not_end(make_client, log_capture):
    def body():
        yield b'data: {"choices":[]}\n'
        raise httpx.ReadError("reset")

    def reply(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body(), request=request)

    client, _ = make_client([reply])
    stream = client.create_chat_completion_stream(REQ)
    assert stream.receive() is not None  # nosec B101
    with pytest.raises(DeepseekError):
        stream.receive()
    names = [e["event"] for e in events(log_capture)]
    assert names == ["request.start", "stream.open", "stream.error"]  # nosec B101
    assert events(log_capture)[-1]["error_code"] == "transport"  # nosec B101
