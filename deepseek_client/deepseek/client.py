"""Deepseek API client.

Summary:
- Non-streaming calls go through the retrying executor (linear backoff on
  transport failures and 429/5xx)
- Streaming calls open the response once and hand it to a pull-based reader
- Every failure surfaces as ``DeepseekError`` with a closed ``ErrorCode``

This module only wires configuration, transport and the endpoint mixins
together; request semantics live in the mixins and the base layer.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..base.http import RequestBuilder, create_http_client
from ..base.logging import get_logger
from ..base.resilience.retry import RetryConfig
from ..config import ClientConfig
from .account_helpers import DeepseekAccountMixin
from .chat_helpers import DeepseekChatMixin
from .helpers import DeepseekCommonMixin
from .models_helpers import DeepseekModelsMixin
from .stream_helpers import DeepseekStreamingMixin
from .tokens_helpers import DeepseekTokensMixin


class DeepseekClient(
    DeepseekCommonMixin,
    DeepseekChatMixin,
    DeepseekStreamingMixin,
    DeepseekAccountMixin,
    DeepseekModelsMixin,
    DeepseekTokensMixin,
):
    """Synchronous client for the Deepseek HTTP API.

    Parameters:
        api_key: API key sent as a bearer token. Required unless ``config``
            is given.
        config: A complete :class:`ClientConfig`; keyword options given next
            to it override its fields.
        http_client: Caller-owned ``httpx.Client`` (custom transport,
            proxies). The client never closes a transport it did not create.
        **options: Any other :class:`ClientConfig` field (``base_url``,
            ``timeout``, ``max_retries``, ``retry_delay``,
            ``max_request_size``, ``organization``, ``user_agent``, ``debug``,
            ``extra_headers``).

    The configuration is frozen at construction; one client may be shared
    across threads. Stream readers it returns may not.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
        **options: Any,
    ) -> None:
        if config is None:
            given = {k: v for k, v in options.items() if v is not None}
            config = ClientConfig(api_key=api_key or "", **given)
        else:
            config = config.with_overrides(api_key=api_key, **options)
        self._config = config
        self._builder = RequestBuilder(config)
        self._retry = RetryConfig(max_retries=config.max_retries, retry_delay=config.retry_delay)
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else create_http_client(config.timeout)
        self._logger = get_logger("deepseek.client")
        self._closed = False

    @classmethod
    def from_env(cls, *, http_client: Optional[httpx.Client] = None, **overrides: Any) -> "DeepseekClient":
        """Build a client from ``DEEPSEEK_*`` environment variables (and ``.env``)."""
        return cls(config=ClientConfig.from_env(**overrides), http_client=http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def close(self) -> None:
        """Close the owned transport. Idempotent; caller-owned transports are left open."""
        if self._closed:
            return
        self._closed = True
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "DeepseekClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DeepseekClient(base_url={self._config.base_url!r})"


__all__ = ["DeepseekClient"]
