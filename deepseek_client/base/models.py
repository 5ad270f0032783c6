"""
Wire DTOs public surface.

This module re-exports the one-topic-per-file implementations under
``deepseek_client.base.models_parts`` so callers have a single stable import
path.
"""

from .models_parts.message import (
    Role,
    FunctionCall,
    FunctionCallDelta,
    ToolCall,
    ToolCallDelta,
    Message,
)
from .models_parts.chat_request import (
    FunctionDefinition,
    Tool,
    ResponseFormat,
    ChatCompletionRequest,
)
from .models_parts.chat_response import Usage, Choice, ChatCompletionResponse
from .models_parts.stream_chunk import Delta, StreamChoice, ChatCompletionChunk
from .models_parts.completion import (
    CompletionRequest,
    CompletionChoice,
    CompletionResponse,
    CompletionChunk,
)
from .models_parts.api_error import APIErrorEnvelope
from .models_parts.account import (
    BalanceInfo,
    Balance,
    UsageParams,
    UsageRecord,
    UsageTotal,
    UsageReport,
)
from .models_parts.model_info import PricingConfig, ModelInfo, ModelList
from .models_parts.tokens import TokenCountDetails, TokenCount, Tokenization

__all__ = [
    "Role",
    "FunctionCall",
    "FunctionCallDelta",
    "ToolCall",
    "ToolCallDelta",
    "Message",
    "FunctionDefinition",
    "Tool",
    "ResponseFormat",
    "ChatCompletionRequest",
    "Usage",
    "Choice",
    "ChatCompletionResponse",
    "Delta",
    "StreamChoice",
    "ChatCompletionChunk",
    "CompletionRequest",
    "CompletionChoice",
    "CompletionResponse",
    "CompletionChunk",
    "APIErrorEnvelope",
    "BalanceInfo",
    "Balance",
    "UsageParams",
    "UsageRecord",
    "UsageTotal",
    "UsageReport",
    "PricingConfig",
    "ModelInfo",
    "ModelList",
    "TokenCountDetails",
    "TokenCount",
    "Tokenization",
]
