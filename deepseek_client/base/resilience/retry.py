"""Retry policy for non-streaming requests.

Linear backoff: retry ``n`` (1-based) waits ``retry_delay * n`` seconds.
Only transport failures and responses whose status is in
``retryable_statuses`` are retried; every other ``DeepseekError`` propagates
on the first attempt. Attempts are strictly sequential.
"""
from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional, Protocol, TypeVar

from ..cancellation import CancellationToken
from ..constants import RETRYABLE_STATUS_CODES
from ..errors import DeepseekError, ErrorCode

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: DeepseekError | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 3
    retry_delay: float = 1.0
    retryable_statuses: FrozenSet[int] = RETRYABLE_STATUS_CODES
    attempt_logger: AttemptLogger | None = None

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delays(self) -> Iterable[float]:
        for attempt in range(1, self.max_retries + 1):
            yield self.retry_delay * attempt

    def should_retry(self, error: DeepseekError) -> bool:
        if error.code is ErrorCode.TRANSPORT:
            return True
        return error.status_code is not None and error.status_code in self.retryable_statuses


DEFAULT_RETRY_CONFIG = RetryConfig()


def retry(
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
    *,
    cancel: Optional[CancellationToken] = None,
):
    """Return a decorator applying the retry policy.

    - The cancellation token (when given) is checked before every attempt;
      a fired token raises ``CANCELLED`` without calling the function again.
    - The last error is raised unchanged once attempts are exhausted.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            last_exc: DeepseekError | None = None
            for attempt, delay in enumerate(list(config.delays()) + [None], start=1):
                if cancel is not None:
                    cancel.raise_if_cancelled()
                try:
                    result = func(*args, **kwargs)
                except DeepseekError as e:
                    last_exc = e
                    retrying = delay is not None and config.should_retry(e)
                    if config.attempt_logger:
                        config.attempt_logger(
                            attempt=attempt,
                            max_attempts=config.max_attempts,
                            delay=delay if retrying else None,
                            error=e,
                        )
                    if retrying:
                        time.sleep(delay)
                        continue
                    raise
                if config.attempt_logger:
                    config.attempt_logger(
                        attempt=attempt,
                        max_attempts=config.max_attempts,
                        delay=None,
                        error=None,
                    )
                return result
            if last_exc is None:  # pragma: no cover - loop always returns or raises
                raise RuntimeError("retry: reached terminal state without captured exception")
            raise last_exc

        return wrapper

    return decorator


__all__ = ["AttemptLogger", "RetryConfig", "DEFAULT_RETRY_CONFIG", "retry"]
