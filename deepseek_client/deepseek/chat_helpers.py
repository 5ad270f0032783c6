"""Non-streaming chat and text completion endpoints."""

from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
)
from ..config.defaults import DEEPSEEK_DEFAULT_CHAT_MODEL, DEEPSEEK_DEFAULT_COMPLETION_MODEL
from .helpers import require

CHAT_COMPLETIONS_PATH = "/chat/completions"
COMPLETIONS_PATH = "/completions"


def prepare_chat_request(
    request: Optional[ChatCompletionRequest], *, stream: bool
) -> ChatCompletionRequest:
    """Validate and return a copy with ``stream`` set and the default model applied."""
    require(request, "request", "cannot be None")
    require(request.messages, "messages")
    return request.prepared(DEEPSEEK_DEFAULT_CHAT_MODEL, stream=stream)


def prepare_completion_request(
    request: Optional[CompletionRequest], *, stream: bool
) -> CompletionRequest:
    require(request, "request", "cannot be None")
    require(request.prompt, "prompt")
    return request.prepared(DEEPSEEK_DEFAULT_COMPLETION_MODEL, stream=stream)


class DeepseekChatMixin:
    """``POST /chat/completions`` and ``POST /completions`` without streaming."""

    def create_chat_completion(
        self,
        request: ChatCompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ChatCompletionResponse:
        """Run a chat completion with retries.

        Raises:
            DeepseekError: ``INVALID_REQUEST`` (no network) for a missing
                request or empty messages; otherwise whatever the executor
                maps the final attempt to.
        """
        prepared = prepare_chat_request(request, stream=False)
        return self._call(
            "POST",
            CHAT_COMPLETIONS_PATH,
            ChatCompletionResponse,
            body=prepared.to_payload(),
            cancel=cancel,
            model=prepared.model,
        )

    def create_completion(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> CompletionResponse:
        prepared = prepare_completion_request(request, stream=False)
        return self._call(
            "POST",
            COMPLETIONS_PATH,
            CompletionResponse,
            body=prepared.to_payload(),
            cancel=cancel,
            model=prepared.model,
        )


__all__ = [
    "CHAT_COMPLETIONS_PATH",
    "COMPLETIONS_PATH",
    "DeepseekChatMixin",
    "prepare_chat_request",
    "prepare_completion_request",
]
