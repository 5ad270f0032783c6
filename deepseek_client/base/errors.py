"""Unified client error taxonomy public surface.

This module re-exports the implementations under
``deepseek_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import DeepseekError, invalid_request
from .errors_parts.classification import (
    is_html,
    transport_error,
    classify,
    classify_exception,
    decode_error_envelope,
    parse_retry_after,
)

__all__ = [
    "ErrorCode",
    "DeepseekError",
    "invalid_request",
    "classify",
    "classify_exception",
    "decode_error_envelope",
    "parse_retry_after",
    "is_html",
    "transport_error",
]
