"""Pull-based readers for streamed completions.

A :class:`StreamReader` owns an open ``httpx.Response``, a
:class:`LineFramer` over its body and the chunk model frames decode into.
``receive()`` returns one decoded chunk per call and ``None`` once the stream
has ended; after that it keeps returning ``None`` without reading.

Frames are delivered strictly in wire order; nothing is prefetched. A reader
is single-consumer state and must not be shared between threads.
"""
from __future__ import annotations

import logging
import time
from typing import ClassVar, Generic, Iterator, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..cancellation import CancellationToken
from ..constants import STREAM_DONE_MARKER
from ..errors import DeepseekError, ErrorCode, classify_exception, transport_error
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models import ChatCompletionChunk, CompletionChunk
from .framing import LineFramer

C = TypeVar("C", bound=BaseModel)

_logger = get_logger("deepseek.stream")


class StreamReader(Generic[C]):
    """Decodes SSE frames of one response into ``chunk_model`` instances.

    Errors:
        * ``STREAM_DECODE``: a frame is not a valid chunk. The reader stays
          usable; the next call reads the next frame.
        * ``TRANSPORT``: reading the body failed (retryable, cause on ``raw``).
          The reader is then failed: the response is closed and every later
          call raises the same error instead of reporting end of stream.
        * ``CANCELLED``: the cancellation token fired before this read.
    """

    chunk_model: ClassVar[Optional[Type[BaseModel]]] = None

    def __init__(
        self,
        response: httpx.Response,
        *,
        chunk_model: Optional[Type[C]] = None,
        cancel: Optional[CancellationToken] = None,
        logger: logging.Logger | None = None,
        log_level: int = logging.DEBUG,
        ctx: Optional[LogContext] = None,
    ) -> None:
        model = chunk_model or self.chunk_model
        if model is None:
            raise TypeError(f"{type(self).__name__} requires a chunk_model")
        self._response = response
        self._framer = LineFramer(response.iter_bytes())
        self._model: Type[BaseModel] = model
        self._cancel = cancel
        self._logger = logger or _logger
        self._log_level = log_level
        self._ctx = ctx
        self._done = False
        self._closed = False
        self._failure: Optional[DeepseekError] = None
        self._received = 0
        self._started = time.perf_counter()

    @property
    def done(self) -> bool:
        """Whether the stream ended cleanly or the reader was closed.

        A reader stopped by a transport error is not done; see :attr:`failure`.
        """
        return self._failure is None and (self._done or self._closed)

    @property
    def failure(self) -> Optional[DeepseekError]:
        """The transport error that ended the stream, if any."""
        return self._failure

    @property
    def received(self) -> int:
        """Number of chunks decoded so far."""
        return self._received

    @property
    def response(self) -> httpx.Response:
        return self._response

    def receive(self) -> Optional[C]:
        """Return the next chunk, or ``None`` at end of stream."""
        if self._failure is not None:
            raise self._failure
        if self._done or self._closed:
            return None
        if self._cancel is not None:
            self._cancel.raise_if_cancelled()
        try:
            frame = self._framer.next_frame()
        except Exception as e:
            if classify_exception(e) is not ErrorCode.TRANSPORT:
                raise
            self._fail(transport_error(e, "error reading from stream"))
            raise self._failure from e
        if frame is None or frame == STREAM_DONE_MARKER:
            self._finish("done" if frame is not None else "eof")
            return None
        try:
            chunk = self._model.model_validate_json(frame)
        except (ValidationError, ValueError) as e:
            text = frame.decode("utf-8", errors="replace")
            log_event(
                self._logger,
                "stream.decode_error",
                self._ctx,
                level=self._log_level,
                index=self._received,
                payload=text[:200],
            )
            raise DeepseekError(
                code=ErrorCode.STREAM_DECODE,
                message=f"failed to decode stream chunk: {e}",
                body=text,
                raw=e,
            ) from e
        self._received += 1
        return chunk  # type: ignore[return-value]

    def close(self) -> None:
        """Release the response body. Safe to call repeatedly or before reading."""
        if self._closed:
            return
        self._closed = True
        self._response.close()

    def _fail(self, error: DeepseekError) -> None:
        self._failure = error
        self._framer.discard()
        log_event(
            self._logger,
            "stream.error",
            self._ctx,
            level=self._log_level,
            error_code=error.code.value,
            chunks=self._received,
        )
        self.close()

    def _finish(self, reason: str) -> None:
        self._done = True
        log_event(
            self._logger,
            "stream.end",
            self._ctx,
            level=self._log_level,
            reason=reason,
            chunks=self._received,
            elapsed_ms=round((time.perf_counter() - self._started) * 1000, 3),
        )
        self.close()

    def __iter__(self) -> Iterator[C]:
        while True:
            chunk = self.receive()
            if chunk is None:
                return
            yield chunk

    def __enter__(self) -> "StreamReader[C]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ChatCompletionStream(StreamReader[ChatCompletionChunk]):
    """Reader for ``POST /chat/completions`` with ``stream=true``."""

    chunk_model = ChatCompletionChunk


class CompletionStream(StreamReader[CompletionChunk]):
    """Reader for ``POST /completions`` with ``stream=true``."""

    chunk_model = CompletionChunk


__all__ = ["StreamReader", "ChatCompletionStream", "CompletionStream"]
