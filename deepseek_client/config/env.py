"""deepseek_client.config.env
==========================

Environment variable names read by :meth:`ClientConfig.from_env` and small
typed lookup helpers. Helpers never raise on unset variables; a set but
malformed value raises ``INVALID_REQUEST`` naming the variable.
"""

from __future__ import annotations

import os
from typing import Optional

from ..base.errors import invalid_request

API_KEY_ENV = "DEEPSEEK_API_KEY"  # pragma: allowlist secret - env var name, not a secret
BASE_URL_ENV = "DEEPSEEK_BASE_URL"
MAX_RETRIES_ENV = "DEEPSEEK_MAX_RETRIES"
TIMEOUT_ENV = "DEEPSEEK_TIMEOUT"
DEBUG_ENV = "DEEPSEEK_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a template placeholder.

    Case-insensitive: contains 'placeholder', 'changeme' or 'your-'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith("your-")


def env_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_int(name: str) -> Optional[int]:
    value = env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise invalid_request(name, f"{name} must be an integer, got {value!r}") from e


def env_float(name: str) -> Optional[float]:
    """Parse a float; a trailing ``s`` unit (``30s``) is accepted."""
    value = env_str(name)
    if value is None:
        return None
    text = value[:-1] if value.endswith("s") else value
    try:
        return float(text)
    except ValueError as e:
        raise invalid_request(name, f"{name} must be a number of seconds, got {value!r}") from e


def env_bool(name: str) -> Optional[bool]:
    value = env_str(name)
    if value is None:
        return None
    return value.lower() in _TRUTHY


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "MAX_RETRIES_ENV",
    "TIMEOUT_ENV",
    "DEBUG_ENV",
    "is_placeholder",
    "env_str",
    "env_int",
    "env_float",
    "env_bool",
]
