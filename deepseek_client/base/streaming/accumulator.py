"""Helpers that fold a stream of chunks into the full response text."""
from __future__ import annotations

from typing import List, Optional, Union

from ..models import ChatCompletionChunk, CompletionChunk
from .stream_reader import StreamReader


class ContentAccumulator:
    """Concatenates content fragments of the first choice.

    Reasoning fragments (``reasoning_content`` deltas) are kept apart from the
    answer text. The last finish reason seen is recorded for inspection.
    """

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._reasoning: List[str] = []
        self.finish_reason: Optional[str] = None

    def add(self, content: Optional[str]) -> None:
        if content:
            self._parts.append(content)

    def feed(self, chunk: Union[ChatCompletionChunk, CompletionChunk]) -> None:
        if not chunk.choices:
            return
        choice = chunk.choices[0]
        if choice.finish_reason:
            self.finish_reason = choice.finish_reason
        if isinstance(chunk, CompletionChunk):
            self.add(choice.text)  # type: ignore[union-attr]
            return
        delta = choice.delta  # type: ignore[union-attr]
        self.add(delta.content)
        if delta.reasoning_content:
            self._reasoning.append(delta.reasoning_content)

    @property
    def reasoning(self) -> str:
        return "".join(self._reasoning)

    def reset(self) -> None:
        self._parts.clear()
        self._reasoning.clear()
        self.finish_reason = None

    def __str__(self) -> str:
        return "".join(self._parts)


def collect_full_response(stream: StreamReader) -> str:
    """Drain ``stream`` and return the concatenated first-choice content.

    The stream is closed afterwards, also when reading fails.
    """
    accumulator = ContentAccumulator()
    try:
        for chunk in stream:
            accumulator.feed(chunk)
    finally:
        stream.close()
    return str(accumulator)


__all__ = ["ContentAccumulator", "collect_full_response"]
