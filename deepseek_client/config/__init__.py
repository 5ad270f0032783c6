"""Client configuration layer.

Sources merge in a fixed order:
    1. Built-in defaults (``config.defaults``)
    2. Environment variables (``DEEPSEEK_*``, after a local ``.env`` is loaded once)
    3. Keyword overrides passed by the caller

Public API
----------
* ClientConfig: immutable settings shared by every call of one client.
* ClientConfig.from_env(**overrides) -> ClientConfig
* load_dotenv_once()
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..base.errors import invalid_request
from .defaults import (
    DEEPSEEK_DEFAULT_BASE_URL,
    DEFAULT_MAX_REQUEST_SIZE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from .env import (
    API_KEY_ENV,
    BASE_URL_ENV,
    DEBUG_ENV,
    MAX_RETRIES_ENV,
    TIMEOUT_ENV,
    env_bool,
    env_float,
    env_int,
    env_str,
    is_placeholder,
)

_DOTENV_LOADED = False


def load_dotenv_once() -> None:
    """Lightweight .env loader (no external dependency).

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Existing environment variables win unless their value
    looks like a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):]
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _reset_dotenv_state() -> None:
    """Allow tests to re-run the .env loader."""
    global _DOTENV_LOADED
    _DOTENV_LOADED = False


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings.

    ``api_key`` is required; every other field has a default. Validation runs
    at construction so a bad value fails before any request is built.
    """

    api_key: str
    base_url: str = DEEPSEEK_DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS
    max_request_size: int = DEFAULT_MAX_REQUEST_SIZE
    organization: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False
    extra_headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.api_key or not str(self.api_key).strip():
            raise invalid_request("api_key", "API key is required")
        if not self.base_url:
            raise invalid_request("base_url", "base URL must not be empty")
        if self.timeout <= 0:
            raise invalid_request("timeout", "timeout must be positive")
        if self.max_retries < 0:
            raise invalid_request("max_retries", "max_retries must not be negative")
        if self.retry_delay < 0:
            raise invalid_request("retry_delay", "retry_delay must not be negative")
        if self.max_request_size <= 0:
            raise invalid_request("max_request_size", "max_request_size must be positive")

    def with_overrides(self, **overrides: Any) -> "ClientConfig":
        """Return a copy with the non-``None`` overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Build a config from ``DEEPSEEK_*`` variables plus keyword overrides.

        Overrides set to ``None`` are ignored so callers can pass optional
        arguments straight through.
        """
        load_dotenv_once()
        values: Dict[str, Any] = {
            "api_key": env_str(API_KEY_ENV),
            "base_url": env_str(BASE_URL_ENV),
            "max_retries": env_int(MAX_RETRIES_ENV),
            "timeout": env_float(TIMEOUT_ENV),
            "debug": env_bool(DEBUG_ENV),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        values = {k: v for k, v in values.items() if v is not None}
        if "api_key" not in values:
            raise invalid_request("api_key", f"API key is required (set {API_KEY_ENV})")
        return cls(**values)


__all__ = ["ClientConfig", "load_dotenv_once"]
