"""Account endpoints: balance and usage."""

from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.errors import invalid_request
from ..base.models import Balance, UsageParams, UsageReport
from .helpers import require

BALANCE_PATH = "/user/balance"
USAGE_PATH = "/user/usage"
USAGE_GRANULARITIES = ("hourly", "daily", "monthly")


def usage_query(params: Optional[UsageParams]) -> dict[str, str]:
    """Validate ``params`` and return the query string mapping."""
    require(params, "params", "cannot be None")
    require(params.start_time, "start_time")
    require(params.end_time, "end_time")
    if params.granularity not in USAGE_GRANULARITIES:
        raise invalid_request(
            "granularity",
            f"must be one of {', '.join(USAGE_GRANULARITIES)}, got {params.granularity!r}",
        )
    return {
        "start_time": params.start_time,
        "end_time": params.end_time,
        "granularity": params.granularity,
    }


class DeepseekAccountMixin:
    def get_balance(self, *, cancel: Optional[CancellationToken] = None) -> Balance:
        return self._call("GET", BALANCE_PATH, Balance, cancel=cancel)

    def get_usage(
        self,
        params: UsageParams,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> UsageReport:
        """Usage for a time range, bucketed by ``params.granularity``."""
        query = usage_query(params)
        return self._call("GET", USAGE_PATH, UsageReport, params=query, cancel=cancel)


__all__ = ["BALANCE_PATH", "USAGE_PATH", "USAGE_GRANULARITIES", "DeepseekAccountMixin", "usage_query"]
