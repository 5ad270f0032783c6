"""Cooperative cancellation primitives (public API facade).

The concrete implementation lives under ``cancellation_parts``. Every client
call accepts an optional ``CancellationToken``; it is checked before each
request attempt and at each stream receive.
"""

from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken"]
