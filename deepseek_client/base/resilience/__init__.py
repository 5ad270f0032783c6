"""Resilience primitives (retry policy)."""

from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, retry

__all__ = ["RetryConfig", "DEFAULT_RETRY_CONFIG", "retry"]
