"""Cooperative cancellation token.

Exposes the ``CancellationToken`` a caller hands to any client call. The
client polls it before each request attempt and at each stream receive; a
cancelled token surfaces as ``DeepseekError(code=CANCELLED)``.
"""

from __future__ import annotations

from threading import Lock
from typing import List

from ..errors import DeepseekError, ErrorCode
from .state import State


class CancellationToken:
    """A cooperative cancellation signal with optional cascading to children.

    Thread-safe for ``cancel`` + ``raise_if_cancelled`` usage: one thread may
    cancel while another runs the call that observes it.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._state.cancelled

    @property
    def reason(self) -> str | None:
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation and cascade to children. Idempotent."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        with self._lock:
            self._children.append(token)
            already = self._state.cancelled
            reason = self._state.reason
        if already:
            token.cancel(reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise ``DeepseekError(code=CANCELLED)`` if cancellation was requested."""
        if self._state.cancelled:
            raise DeepseekError(
                code=ErrorCode.CANCELLED,
                message=self._state.reason or "operation cancelled",
            )

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["CancellationToken"]
