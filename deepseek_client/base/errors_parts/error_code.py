"""
Normalized client error codes (taxonomy).

Defines the closed `ErrorCode` enumeration carried by every `DeepseekError`.
Callers branch on these values, not on raw HTTP status codes, to decide
whether to retry, back off, or abort. Values are lowercase snake_case and are
considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error categories raised by the client."""

    INVALID_REQUEST = "invalid_request"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    MODEL_NOT_FOUND = "model_not_found"
    NOT_FOUND = "not_found"
    REQUEST_FAILED = "request_failed"
    TRANSPORT = "transport"
    STREAM_DECODE = "stream_decode"
    ERROR_RESPONSE_DECODE = "error_response_decode"
    RESPONSE_DECODE = "response_decode"
    CANCELLED = "cancelled"


__all__ = ["ErrorCode"]
