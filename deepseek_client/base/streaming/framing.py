"""Server-sent-event line framing over a raw byte iterator.

The framer knows nothing about payloads: it turns the HTTP body into
content-bearing frames (``data:`` prefix removed) and leaves decoding to the
reader that owns it.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ..constants import STREAM_DATA_PREFIX

_COMMENT_PREFIX = b":"


def strip_frame(line: bytes) -> Optional[bytes]:
    """Return the payload of one raw line, or ``None`` for content-free lines.

    Blank lines and SSE comments (``: keep-alive``) carry no content.
    """
    line = line.strip()
    if not line or line.startswith(_COMMENT_PREFIX):
        return None
    if line.startswith(STREAM_DATA_PREFIX):
        line = line[len(STREAM_DATA_PREFIX):].strip()
    return line or None


class LineFramer:
    """Splits a chunked byte stream into newline-terminated frames.

    Bytes accumulate across reads until a newline is found, so a frame split
    over several network chunks is reassembled. When the source is exhausted,
    leftover bytes without a trailing newline form one final line.

    Exceptions raised by the source iterator propagate unchanged. A failed
    source cannot be resumed, so callers drop the framer with :meth:`discard`.
    """

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks: Iterator[bytes] = iter(chunks)
        self._buffer = bytearray()
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """Whether the source is drained and no buffered bytes remain."""
        return self._exhausted and not self._buffer

    def next_frame(self) -> Optional[bytes]:
        """Return the next content-bearing frame, or ``None`` at end of data."""
        while True:
            line = self._next_line()
            if line is None:
                return None
            frame = strip_frame(line)
            if frame is not None:
                return frame

    def _next_line(self) -> Optional[bytes]:
        while True:
            idx = self._buffer.find(b"\n")
            if idx >= 0:
                line = bytes(self._buffer[:idx])
                del self._buffer[: idx + 1]
                return line
            if self._exhausted:
                if not self._buffer:
                    return None
                line = bytes(self._buffer)
                self._buffer.clear()
                return line
            try:
                chunk = next(self._chunks)
            except StopIteration:
                self._exhausted = True
                continue
            if chunk:
                self._buffer.extend(chunk)

    def discard(self) -> None:
        """Drop buffered bytes and stop reading from the source."""
        self._buffer.clear()
        self._chunks = iter(())
        self._exhausted = True


__all__ = ["LineFramer", "strip_frame"]
