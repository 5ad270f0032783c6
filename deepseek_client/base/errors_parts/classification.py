"""
Error classification: non-2xx responses and transport exceptions to `DeepseekError`.

This is the single place that encodes which HTTP outcomes map to which
:class:`ErrorCode`. Callers branch on the code to decide whether to retry,
back off, or abort.

Mapping:
    401                         -> AUTHENTICATION
    400, 403                    -> INVALID_REQUEST (carries ``param``)
    404 + ``model_not_found``   -> MODEL_NOT_FOUND (carries ``model``)
    404 otherwise               -> NOT_FOUND
    429                         -> RATE_LIMIT (carries ``retry_after``)
    anything else (incl. 5xx)   -> REQUEST_FAILED (carries ``status_code``)
"""
from __future__ import annotations

import json
from typing import Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from ..constants import (
    DEFAULT_RETRY_AFTER_SECONDS,
    MODEL_NOT_FOUND_TYPE,
    RETRYABLE_STATUS_CODES,
)
from ..models_parts.api_error import APIErrorEnvelope
from .error_code import ErrorCode
from .provider_error import DeepseekError

_HTML_MARKERS = (
    b"<!doctype html",
    b"<html",
    b"</html>",
    b"<body",
    b"</body>",
    b"<head",
    b"</head>",
)


def _header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """Case-insensitive header lookup that works for plain dicts too."""
    if not headers:
        return None
    if isinstance(headers, httpx.Headers):
        return headers.get(name)
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def parse_retry_after(headers: Optional[Mapping[str, str]]) -> float:
    """Return the ``Retry-After`` delay in seconds.

    Only the delta-seconds form is understood; a missing, negative or
    unparsable value yields ``DEFAULT_RETRY_AFTER_SECONDS``.
    """
    value = _header(headers, "Retry-After")
    if value is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        seconds = float(value.strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS
    if seconds < 0:
        return DEFAULT_RETRY_AFTER_SECONDS
    return seconds


def is_html(body: bytes) -> bool:
    """Whether a response body looks like an HTML page (proxy/gateway error)."""
    lower = body.lower()
    return any(marker in lower for marker in _HTML_MARKERS)


def classify(
    status_code: int,
    envelope: APIErrorEnvelope,
    headers: Optional[Mapping[str, str]] = None,
) -> DeepseekError:
    """Map a non-2xx status and its decoded error envelope to a `DeepseekError`."""
    message = envelope.message or f"HTTP {status_code}"
    common = {
        "message": message,
        "status_code": status_code,
        "error_type": envelope.type,
        "retryable": status_code in RETRYABLE_STATUS_CODES,
    }
    if status_code == 401:
        return DeepseekError(code=ErrorCode.AUTHENTICATION, **common)
    if status_code in (400, 403):
        return DeepseekError(code=ErrorCode.INVALID_REQUEST, param=envelope.param, **common)
    if status_code == 404:
        if envelope.type == MODEL_NOT_FOUND_TYPE:
            return DeepseekError(
                code=ErrorCode.MODEL_NOT_FOUND,
                param=envelope.param,
                model=envelope.param,
                **common,
            )
        return DeepseekError(code=ErrorCode.NOT_FOUND, param=envelope.param, **common)
    if status_code == 429:
        return DeepseekError(
            code=ErrorCode.RATE_LIMIT,
            retry_after=parse_retry_after(headers),
            **common,
        )
    return DeepseekError(code=ErrorCode.REQUEST_FAILED, **common)


def decode_error_envelope(
    status_code: int,
    body: Union[bytes, str],
    headers: Optional[Mapping[str, str]] = None,
) -> DeepseekError:
    """Decode a non-2xx body and classify it.

    A body that is HTML, not JSON, or not an envelope-shaped object yields
    ``ERROR_RESPONSE_DECODE`` carrying the raw status and body text.
    """
    raw = body.encode("utf-8") if isinstance(body, str) else body
    text = raw.decode("utf-8", errors="replace")
    retryable = status_code in RETRYABLE_STATUS_CODES
    if is_html(raw):
        return DeepseekError(
            code=ErrorCode.ERROR_RESPONSE_DECODE,
            message=f"received HTML response with status {status_code}",
            status_code=status_code,
            body=text,
            retryable=retryable,
        )
    try:
        envelope = APIErrorEnvelope.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as e:
        return DeepseekError(
            code=ErrorCode.ERROR_RESPONSE_DECODE,
            message=f"api error (status {status_code}): {text}",
            status_code=status_code,
            body=text,
            retryable=retryable,
            raw=e,
        )
    return classify(status_code, envelope, headers)


def classify_exception(exc: BaseException) -> Optional[ErrorCode]:
    """Classify an exception raised while talking to the server.

    Precedence:
        1. DeepseekError passthrough.
        2. httpx request/stream failures and OS-level I/O errors -> TRANSPORT.
        3. ``None`` for anything else (a bug, not a client failure).
    """
    if isinstance(exc, DeepseekError):
        return exc.code
    if isinstance(exc, (httpx.RequestError, httpx.StreamError, OSError)):
        return ErrorCode.TRANSPORT
    return None


def transport_error(exc: BaseException, context: str) -> DeepseekError:
    """Wrap a transport exception as a retryable ``TRANSPORT`` error."""
    if isinstance(exc, DeepseekError):
        return exc
    return DeepseekError(
        code=ErrorCode.TRANSPORT,
        message=f"{context}: {exc}",
        retryable=True,
        raw=exc,
    )


__all__ = [
    "classify",
    "classify_exception",
    "decode_error_envelope",
    "parse_retry_after",
    "is_html",
    "transport_error",
]
