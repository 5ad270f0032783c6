"""
Model listing DTOs for ``GET /models`` and ``GET /models/{id}``.

Context window, token limits and pricing are optional extensions some
deployments add to the OpenAI-style listing; the client only transports them.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class PricingConfig(BaseModel):
    prompt_token_price: float = 0.0
    completion_token_price: float = 0.0
    currency: str = ""


class ModelInfo(BaseModel):
    id: str
    object: str = "model"
    owned_by: str = ""
    created: Optional[int] = None
    context_window: Optional[int] = None
    max_tokens: Optional[int] = None
    pricing_config: Optional[PricingConfig] = None
    supported_features: Dict[str, bool] = Field(default_factory=dict)


class ModelList(BaseModel):
    object: str = "list"
    data: List[ModelInfo] = Field(default_factory=list)

    def ids(self) -> List[str]:
        return [m.id for m in self.data]


__all__ = ["PricingConfig", "ModelInfo", "ModelList"]
