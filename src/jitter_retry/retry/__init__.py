"""
jitter_retry - Retry Logic.

Decorrelated-jitter backoff and the retry driver.
"""

from .config import (
    DEFAULT_CONFIG,
    BackoffConfig,
    merge_config,
    sleep_ms,
    async_sleep_ms,
)
from .backoff import (
    calculate_delay,
    call,
    async_call,
    with_backoff,
    async_with_backoff,
)

__all__ = [
    "DEFAULT_CONFIG",
    "BackoffConfig",
    "merge_config",
    "sleep_ms",
    "async_sleep_ms",
    "calculate_delay",
    "call",
    "async_call",
    "with_backoff",
    "async_with_backoff",
]
