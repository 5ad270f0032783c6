"""Non-streaming executor and stream opener.

``execute`` sends one built request under the retry policy and decodes a 2xx
body into a pydantic model. ``open_stream`` sends exactly once, never
retries, and hands back the still-open response for a stream reader.
Non-2xx responses of both paths go through the error mapper.
"""
from __future__ import annotations

import logging
import time
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..cancellation import CancellationToken
from ..errors import (
    DeepseekError,
    ErrorCode,
    classify_exception,
    decode_error_envelope,
    transport_error,
)
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..resilience.retry import RetryConfig, retry

M = TypeVar("M", bound=BaseModel)

_logger = get_logger("deepseek.http")


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the mapped error for a non-2xx response whose body has been read."""
    if response.is_success:
        return
    raise decode_error_envelope(response.status_code, response.content, response.headers)


def _is_transport(exc: BaseException) -> bool:
    return classify_exception(exc) is ErrorCode.TRANSPORT


def decode_response(response: httpx.Response, response_model: Type[M]) -> M:
    """Decode a 2xx body; failure raises ``RESPONSE_DECODE`` with the body text."""
    try:
        return response_model.model_validate_json(response.content)
    except (ValidationError, ValueError) as e:
        raise DeepseekError(
            code=ErrorCode.RESPONSE_DECODE,
            message=f"failed to decode {response_model.__name__} response: {e}",
            status_code=response.status_code,
            body=response.text,
            raw=e,
        ) from e


def _ctx(request: httpx.Request, ctx: Optional[LogContext]) -> LogContext:
    return ctx or LogContext(method=request.method, path=request.url.path)


def execute(
    http_client: httpx.Client,
    request: httpx.Request,
    response_model: Type[M],
    *,
    retry_config: RetryConfig,
    cancel: Optional[CancellationToken] = None,
    logger: logging.Logger | None = None,
    log_level: int = logging.DEBUG,
    ctx: Optional[LogContext] = None,
) -> M:
    """Send ``request`` with retries and decode the response into ``response_model``."""
    log = logger or _logger
    context = _ctx(request, ctx)

    def _on_attempt(*, attempt: int, max_attempts: int, delay: float | None, error: DeepseekError | None) -> None:
        if error is not None and delay is not None:
            log_event(
                log,
                "request.retry",
                context,
                level=log_level,
                attempt=attempt,
                max_attempts=max_attempts,
                delay=delay,
                error_code=error.code.value,
                status=error.status_code,
            )

    policy = RetryConfig(
        max_retries=retry_config.max_retries,
        retry_delay=retry_config.retry_delay,
        retryable_statuses=retry_config.retryable_statuses,
        attempt_logger=_on_attempt,
    )

    @retry(policy, cancel=cancel)
    def _send_once() -> httpx.Response:
        try:
            response = http_client.send(request)
        except Exception as e:
            if not _is_transport(e):
                raise
            raise transport_error(e, f"{request.method} {request.url.path} failed") from e
        _raise_for_status(response)
        return response

    start = time.perf_counter()
    log_event(log, "request.start", context, level=log_level)
    try:
        response = _send_once()
        result = decode_response(response, response_model)
    except DeepseekError as e:
        log_event(
            log,
            "request.error",
            context,
            level=log_level,
            error_code=e.code.value,
            status=e.status_code,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 3),
        )
        raise
    log_event(
        log,
        "request.end",
        context,
        level=log_level,
        status=response.status_code,
        elapsed_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return result


def open_stream(
    http_client: httpx.Client,
    request: httpx.Request,
    *,
    cancel: Optional[CancellationToken] = None,
    logger: logging.Logger | None = None,
    log_level: int = logging.DEBUG,
    ctx: Optional[LogContext] = None,
) -> httpx.Response:
    """Send ``request`` once with a streamed body and return the open response.

    On a non-2xx status the full body is read, the response closed and the
    mapped error raised. The caller owns the returned response.
    """
    log = logger or _logger
    context = _ctx(request, ctx)
    if cancel is not None:
        cancel.raise_if_cancelled()
    log_event(log, "request.start", context, level=log_level, stream=True)
    try:
        response = http_client.send(request, stream=True)
    except Exception as e:
        if not _is_transport(e):
            raise
        err = transport_error(e, f"{request.method} {request.url.path} stream open failed")
        log_event(log, "request.error", context, level=log_level, error_code=err.code.value)
        raise err from e
    if response.is_success:
        log_event(log, "stream.open", context, level=log_level, status=response.status_code)
        return response
    try:
        response.read()
    except Exception as e:
        if not _is_transport(e):
            raise
        err = transport_error(e, "reading error response failed")
        log_event(log, "request.error", context, level=log_level, error_code=err.code.value, status=response.status_code)
        raise err from e
    finally:
        response.close()
    err = decode_error_envelope(response.status_code, response.content, response.headers)
    log_event(log, "request.error", context, level=log_level, error_code=err.code.value, status=err.status_code)
    raise err


__all__ = ["decode_response", "execute", "open_stream"]
