"""Model listing endpoints."""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from ..base.cancellation import CancellationToken
from ..base.models import ModelInfo, ModelList
from .helpers import require

MODELS_PATH = "/models"


class DeepseekModelsMixin:
    def list_models(self, *, cancel: Optional[CancellationToken] = None) -> ModelList:
        return self._call("GET", MODELS_PATH, ModelList, cancel=cancel)

    def get_model(
        self,
        model_id: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ModelInfo:
        """Details for one model; an unknown id maps to ``NOT_FOUND`` or ``MODEL_NOT_FOUND``."""
        require(model_id, "model_id")
        path = f"{MODELS_PATH}/{quote(model_id, safe='')}"
        return self._call("GET", path, ModelInfo, cancel=cancel, model=model_id)


__all__ = ["MODELS_PATH", "DeepseekModelsMixin"]
