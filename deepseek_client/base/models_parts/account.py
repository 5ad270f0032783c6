"""
Account DTOs: balance and usage reports.

Balance follows the live ``GET /user/balance`` shape. Usage reports are a
deployment-specific schema; see DESIGN.md for the shape this client decodes.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class BalanceInfo(BaseModel):
    """Balance for one currency. Amounts are decimal strings as sent."""

    currency: str = ""
    total_balance: str = "0"
    granted_balance: str = "0"
    topped_up_balance: str = "0"


class Balance(BaseModel):
    is_available: bool = False
    balance_infos: List[BalanceInfo] = Field(default_factory=list)


class UsageParams(BaseModel):
    """Query for ``GET /user/usage``; times are RFC 3339 strings."""

    start_time: str = ""
    end_time: str = ""
    granularity: str = "daily"


class UsageRecord(BaseModel):
    timestamp: str = ""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    cost: Optional[float] = None


class UsageTotal(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    cost: Optional[float] = None


class UsageReport(BaseModel):
    object: str = "usage"
    start_time: str = ""
    end_time: str = ""
    data: List[UsageRecord] = Field(default_factory=list)
    total: UsageTotal = Field(default_factory=UsageTotal)


__all__ = [
    "BalanceInfo",
    "Balance",
    "UsageParams",
    "UsageRecord",
    "UsageTotal",
    "UsageReport",
]
