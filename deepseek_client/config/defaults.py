"""deepseek_client.config.defaults
===============================

Small, stable default values for the client. Plain constants only (no I/O)
so every layer can import them without cycles.
"""

from __future__ import annotations

# ---- Identity ----
CLIENT_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"deepseek-client-python/{CLIENT_VERSION}"

# ---- Endpoint ----
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"

# Model applied when a chat request leaves ``model`` empty.
DEEPSEEK_DEFAULT_CHAT_MODEL = "deepseek-chat"
# Model applied when a text-completion request leaves ``model`` empty.
DEEPSEEK_DEFAULT_COMPLETION_MODEL = "deepseek-coder"

# ---- Transport ----
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRIES = 3
# Base of the linear backoff: attempt n waits retry_delay * n.
DEFAULT_RETRY_DELAY_SECONDS = 1.0
# Largest encoded request body accepted before any network call.
DEFAULT_MAX_REQUEST_SIZE = 2 * 1024 * 1024

__all__ = [
    "CLIENT_VERSION",
    "DEFAULT_USER_AGENT",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_CHAT_MODEL",
    "DEEPSEEK_DEFAULT_COMPLETION_MODEL",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY_SECONDS",
    "DEFAULT_MAX_REQUEST_SIZE",
]
