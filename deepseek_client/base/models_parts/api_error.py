"""
API error envelope DTO.

The server reports failures either as a bare object or wrapped under an
``error`` key; both decode to the same :class:`APIErrorEnvelope`.
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, model_validator


class APIErrorEnvelope(BaseModel):
    code: Optional[Union[int, str]] = None
    message: Optional[str] = ""
    type: Optional[str] = None
    param: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            return data["error"]
        return data


__all__ = ["APIErrorEnvelope"]
