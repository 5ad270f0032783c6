"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `deepseek_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import DeepseekError, invalid_request
from .classification import (
    classify,
    classify_exception,
    decode_error_envelope,
    is_html,
    parse_retry_after,
    transport_error,
)

__all__ = [
    "ErrorCode",
    "DeepseekError",
    "invalid_request",
    "classify",
    "classify_exception",
    "decode_error_envelope",
    "is_html",
    "parse_retry_after",
    "transport_error",
]
