"""Streaming package: SSE framing, chunk readers and accumulation helpers."""

from .framing import LineFramer, strip_frame
from .stream_reader import ChatCompletionStream, CompletionStream, StreamReader
from .accumulator import ContentAccumulator, collect_full_response

__all__ = [
    "LineFramer",
    "strip_frame",
    "StreamReader",
    "ChatCompletionStream",
    "CompletionStream",
    "ContentAccumulator",
    "collect_full_response",
]
