"""Streaming chat and text completion endpoints.

Opening a stream is a single HTTP attempt: a failure to connect surfaces as
``TRANSPORT`` and is not retried. On success the returned reader owns the
response body; close it (or use it as a context manager) when done.
"""

from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.models import ChatCompletionRequest, CompletionRequest
from ..base.streaming import ChatCompletionStream, CompletionStream
from .chat_helpers import (
    CHAT_COMPLETIONS_PATH,
    COMPLETIONS_PATH,
    prepare_chat_request,
    prepare_completion_request,
)


class DeepseekStreamingMixin:
    """``stream=true`` variants of the completion endpoints."""

    def create_chat_completion_stream(
        self,
        request: ChatCompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ChatCompletionStream:
        """Open a chat completion stream.

        The caller's request is not modified; ``stream=True`` and the default
        model are applied to a copy.
        """
        prepared = prepare_chat_request(request, stream=True)
        return self._stream(
            CHAT_COMPLETIONS_PATH,
            prepared.to_payload(),
            ChatCompletionStream,
            cancel=cancel,
            model=prepared.model,
        )

    def create_completion_stream(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> CompletionStream:
        prepared = prepare_completion_request(request, stream=True)
        return self._stream(
            COMPLETIONS_PATH,
            prepared.to_payload(),
            CompletionStream,
            cancel=cancel,
            model=prepared.model,
        )


__all__ = ["DeepseekStreamingMixin"]
