"""
Client base package.

Transport-independent building blocks shared by the endpoint mixins:
- Errors: one exception type with a closed code enumeration
- Models (DTOs): pydantic wire types
- HTTP: request building, retrying executor, stream opener
- Streaming: SSE framing and chunk readers
"""

from .cancellation import CancellationToken
from .errors import DeepseekError, ErrorCode
from .http import RequestBuilder, execute, join_url, open_stream
from .logging import configure_logger, get_logger, log_event
from .log_support import LogContext
from .resilience import RetryConfig
from .streaming import (
    ChatCompletionStream,
    CompletionStream,
    ContentAccumulator,
    LineFramer,
    StreamReader,
    collect_full_response,
)
from .utils import extract_json

__all__ = [
    "CancellationToken",
    "DeepseekError",
    "ErrorCode",
    "RequestBuilder",
    "execute",
    "join_url",
    "open_stream",
    "configure_logger",
    "get_logger",
    "log_event",
    "LogContext",
    "RetryConfig",
    "ChatCompletionStream",
    "CompletionStream",
    "ContentAccumulator",
    "LineFramer",
    "StreamReader",
    "collect_full_response",
    "extract_json",
]
