"""HTTP layer: request building, transport factory and executors."""

from .client import create_http_client
from .executor import decode_response, execute, open_stream
from .request import RequestBuilder, join_url

__all__ = [
    "RequestBuilder",
    "create_http_client",
    "decode_response",
    "execute",
    "join_url",
    "open_stream",
]
