"""Models parts package public surface.

Re-exports individual wire DTOs so callers can import from
`deepseek_client.base.models_parts` if needed, while `deepseek_client.base.models`
remains the primary stable import path.
"""

from .message import Role, FunctionCall, FunctionCallDelta, ToolCall, ToolCallDelta, Message
from .chat_request import FunctionDefinition, Tool, ResponseFormat, ChatCompletionRequest
from .chat_response import Usage, Choice, ChatCompletionResponse
from .stream_chunk import Delta, StreamChoice, ChatCompletionChunk
from .completion import CompletionRequest, CompletionChoice, CompletionResponse, CompletionChunk
from .api_error import APIErrorEnvelope
from .account import BalanceInfo, Balance, UsageParams, UsageRecord, UsageTotal, UsageReport
from .model_info import PricingConfig, ModelInfo, ModelList
from .tokens import TokenCountDetails, TokenCount, Tokenization

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
