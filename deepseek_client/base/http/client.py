"""HTTP transport factory.

A ``DeepseekClient`` either receives a caller-owned ``httpx.Client`` or gets
one from :func:`create_http_client`, which it then owns and closes.
"""

from __future__ import annotations

from typing import Optional

import httpx


def create_http_client(
    timeout: float,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Return a new pooled ``httpx.Client`` with a uniform ``timeout``.

    The timeout bounds connect, write and each body read; a long stream is
    therefore only cut when the server stalls between chunks for longer than
    ``timeout`` seconds.
    """
    return httpx.Client(timeout=httpx.Timeout(timeout), transport=transport)


__all__ = ["create_http_client"]
