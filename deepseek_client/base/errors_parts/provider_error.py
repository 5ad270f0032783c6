"""
Structured client error exception type.

Every failure surfaced by the client is a `DeepseekError` tagged with a
normalized `ErrorCode`. The original exception (transport failure, JSON
decode error) is kept on ``raw`` and chained via ``raise ... from``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class DeepseekError(Exception):
    """Represents a classified client failure.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message (server message when available).
        status_code: HTTP status of the response that produced the error.
        param: Offending request parameter, when known.
        model: Model name for ``MODEL_NOT_FOUND`` failures.
        error_type: Type tag from the API error envelope.
        retry_after: Seconds to wait before retrying (``RATE_LIMIT`` only).
        body: Raw response body text for undecodable responses/frames.
        retryable: Hint for callers and the retry policy.
        raw: Optional underlying exception for diagnostics.
    """

    code: ErrorCode
    message: str
    status_code: Optional[int] = None
    param: Optional[str] = None
    model: Optional[str] = None
    error_type: Optional[str] = None
    retry_after: Optional[float] = None
    body: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code is ErrorCode.INVALID_REQUEST and self.param:
            return f"deepseek: invalid request parameter '{self.param}': {self.message}"
        if self.code is ErrorCode.MODEL_NOT_FOUND:
            return f"deepseek: model '{self.model or '-'}' not found: {self.message}"
        if self.code is ErrorCode.RATE_LIMIT:
            return f"deepseek: rate limit exceeded, retry after {self.retry_after or 0:g} seconds: {self.message}"
        if self.status_code is not None:
            return f"deepseek: {self.code.value} (status {self.status_code}): {self.message}"
        return f"deepseek: {self.code.value}: {self.message}"

    @property
    def is_server_error(self) -> bool:
        """Whether the failure came from a 5xx response."""
        return self.status_code is not None and self.status_code >= 500


def invalid_request(param: str, message: str) -> DeepseekError:
    """Build the caller-side ``INVALID_REQUEST`` error raised before any I/O."""
    return DeepseekError(code=ErrorCode.INVALID_REQUEST, message=message, param=param)


__all__ = ["DeepseekError", "invalid_request"]
