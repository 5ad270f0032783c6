"""Tokenizer endpoints.

Counts come from the server; the client performs no local tokenization.
:meth:`DeepseekTokensMixin.estimate_tokens_from_messages` renders a chat
transcript into one prompt string (``<role>content</s>`` per line) and asks
the server to count it, which approximates but does not equal the prompt
tokens of a real chat completion.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..base.cancellation import CancellationToken
from ..base.models import Message, TokenCount, Tokenization
from .helpers import require

TOKEN_COUNT_PATH = "/tokenizer/count"
TOKENIZE_PATH = "/tokenizer/tokenize"


def render_messages(messages: Sequence[Message]) -> str:
    return "".join(f"<{m.role}>{m.content or ''}</s>\n" for m in messages)


class DeepseekTokensMixin:
    def count_tokens(
        self,
        model: str,
        text: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> TokenCount:
        require(model, "model")
        require(text, "text")
        return self._call(
            "POST",
            TOKEN_COUNT_PATH,
            TokenCount,
            body={"model": model, "text": text},
            cancel=cancel,
            model=model,
        )

    def tokenize_text(
        self,
        model: str,
        text: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> Tokenization:
        require(model, "model")
        require(text, "text")
        return self._call(
            "POST",
            TOKENIZE_PATH,
            Tokenization,
            body={"model": model, "text": text},
            cancel=cancel,
            model=model,
        )

    def estimate_tokens_from_messages(
        self,
        model: str,
        messages: Sequence[Message],
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> TokenCount:
        require(model, "model")
        require(messages, "messages")
        return self.count_tokens(model, render_messages(messages), cancel=cancel)


__all__ = ["TOKEN_COUNT_PATH", "TOKENIZE_PATH", "DeepseekTokensMixin", "render_messages"]
