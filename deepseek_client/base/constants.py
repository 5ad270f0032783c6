"""Base shared constants for the client.

Central location to avoid scattering magic strings and default numbers.
"""
from __future__ import annotations

# Literal payload that terminates an SSE stream.
STREAM_DONE_MARKER = b"[DONE]"
# Optional SSE field prefix stripped from every frame.
STREAM_DATA_PREFIX = b"data:"

# Statuses the non-streaming executor retries.
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

# Fallback Retry-After (seconds) for 429 responses without a usable header.
DEFAULT_RETRY_AFTER_SECONDS = 60.0

# Envelope type tag distinguishing a missing model from a generic 404.
MODEL_NOT_FOUND_TYPE = "model_not_found"

__all__ = [
    "STREAM_DONE_MARKER",
    "STREAM_DATA_PREFIX",
    "RETRYABLE_STATUS_CODES",
    "DEFAULT_RETRY_AFTER_SECONDS",
    "MODEL_NOT_FOUND_TYPE",
]
