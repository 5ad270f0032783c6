"""Request construction: URL joining, headers and body encoding.

Every request the client sends is built here so headers stay identical
between the streaming and non-streaming paths. Building never touches the
network; an oversized body fails with ``INVALID_REQUEST`` at this point.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Protocol

import httpx

from ..errors import invalid_request

JSON_CONTENT_TYPE = "application/json"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"
ORGANIZATION_HEADER = "OpenAI-Organization"


class RequestSettings(Protocol):  # pragma: no cover - structural protocol
    api_key: str
    base_url: str
    max_request_size: int
    organization: Optional[str]
    user_agent: str
    extra_headers: Mapping[str, str]


def join_url(base: str, path: str) -> str:
    """Join ``base`` and ``path`` with exactly one slash between them."""
    return base.rstrip("/") + "/" + path.lstrip("/")


class RequestBuilder:
    """Builds ``httpx.Request`` objects for one client configuration."""

    def __init__(self, settings: RequestSettings) -> None:
        self._settings = settings

    def headers(self, *, stream: bool = False) -> httpx.Headers:
        """Return request headers; client-managed names win over ``extra_headers``."""
        s = self._settings
        headers = httpx.Headers(s.extra_headers or {})
        headers["Content-Type"] = JSON_CONTENT_TYPE
        headers["Accept"] = EVENT_STREAM_CONTENT_TYPE if stream else JSON_CONTENT_TYPE
        headers["Authorization"] = f"Bearer {s.api_key}"
        headers["User-Agent"] = s.user_agent
        if s.organization:
            headers[ORGANIZATION_HEADER] = s.organization
        return headers

    def encode(self, json_body: Any) -> bytes:
        """Serialize a payload, enforcing ``max_request_size``."""
        body = json.dumps(json_body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        limit = self._settings.max_request_size
        if len(body) > limit:
            raise invalid_request(
                "request",
                f"request body of {len(body)} bytes exceeds maximum size of {limit} bytes",
            )
        return body

    def build(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        *,
        stream: bool = False,
    ) -> httpx.Request:
        content = self.encode(json_body) if json_body is not None else None
        return httpx.Request(
            method.upper(),
            join_url(self._settings.base_url, path),
            headers=self.headers(stream=stream),
            params=dict(params) if params else None,
            content=content,
        )


__all__ = [
    "JSON_CONTENT_TYPE",
    "EVENT_STREAM_CONTENT_TYPE",
    "ORGANIZATION_HEADER",
    "RequestBuilder",
    "RequestSettings",
    "join_url",
]
