"""Python client for the Deepseek chat-completion API.

Typical use::

    from deepseek_client import DeepseekClient, ChatCompletionRequest, Message

    with DeepseekClient.from_env() as client:
        resp = client.create_chat_completion(
            ChatCompletionRequest(messages=[Message.user("Hello")])
        )
        print(resp.content)

        with client.create_chat_completion_stream(
            ChatCompletionRequest(messages=[Message.user("Tell me a story")])
        ) as stream:
            for chunk in stream:
                print(chunk.choices[0].delta.content or "", end="")
"""

from .config.defaults import CLIENT_VERSION
from .base.cancellation import CancellationToken
from .base.errors import DeepseekError, ErrorCode
from .base.http import join_url
from .base.logging import configure_logger, get_logger
from .base.models import (
    Balance,
    BalanceInfo,
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    CompletionChunk,
    CompletionRequest,
    CompletionResponse,
    Delta,
    FunctionCall,
    FunctionCallDelta,
    FunctionDefinition,
    Message,
    ModelInfo,
    ModelList,
    ResponseFormat,
    Role,
    TokenCount,
    Tokenization,
    Tool,
    ToolCall,
    UsageParams,
    UsageReport,
    Usage,
)
from .base.streaming import (
    ChatCompletionStream,
    CompletionStream,
    ContentAccumulator,
    StreamReader,
    collect_full_response,
)
from .base.utils import extract_json
from .config import ClientConfig
from .deepseek import DeepseekClient

__version__ = CLIENT_VERSION

__all__ = [
    "__version__",
    "DeepseekClient",
    "ClientConfig",
    "CancellationToken",
    "DeepseekError",
    "ErrorCode",
    "join_url",
    "configure_logger",
    "get_logger",
    "Balance",
    "BalanceInfo",
    "ChatCompletionChunk",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "CompletionChunk",
    "CompletionRequest",
    "CompletionResponse",
    "Delta",
    "FunctionCall",
    "FunctionCallDelta",
    "FunctionDefinition",
    "Message",
    "ModelInfo",
    "ModelList",
    "ResponseFormat",
    "Role",
    "TokenCount",
    "Tokenization",
    "Tool",
    "ToolCall",
    "UsageParams",
    "UsageReport",
    "Usage",
    "ChatCompletionStream",
    "CompletionStream",
    "ContentAccumulator",
    "StreamReader",
    "collect_full_response",
    "extract_json",
]
