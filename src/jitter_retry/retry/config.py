"""
Retry configuration and wait primitives.
"""

import asyncio
import dataclasses
import inspect
import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def sleep_ms(ms: int) -> None:
    """Block the calling thread for `ms` milliseconds."""
    time.sleep(ms / 1000)


async def async_sleep_ms(ms: int) -> None:
    """Suspend the current task for `ms` milliseconds."""
    await asyncio.sleep(ms / 1000)


def _no_wait(ms: int) -> None:
    return None


async def _async_no_wait(ms: int) -> None:
    return None


def _is_async_callable(fn: Any) -> bool:
    # Plain coroutine functions, partials of them, and objects with async __call__
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(
        getattr(fn, "__call__", None)
    )


@dataclass(frozen=True)
class BackoffConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_delay_ms: Upper bound for any computed delay (default: 300000)
        base_delay_ms: Minimum delay and exponential base (default: 100)
        max_attempts: Operation invocations allowed before giving up (default: 10)
        wait_fn: Blocking wait used by `call` (default: real sleep)
        async_wait_fn: Coroutine function awaited by `async_call` (default: asyncio sleep)
        legacy_fallback: Treat non-outcome results as Ok(result) instead of
            raising MalformedOutcomeError (default: False)
        rng: Random source for jitter; None uses the `random` module
    """

    max_delay_ms: int = 300_000
    base_delay_ms: int = 100
    max_attempts: int = 10
    wait_fn: Callable[[int], None] = sleep_ms
    async_wait_fn: Callable[[int], Awaitable[None]] = async_sleep_ms
    legacy_fallback: bool = False
    rng: random.Random | None = None

    def __post_init__(self) -> None:
        for name in ("max_delay_ms", "base_delay_ms", "max_attempts"):
            value = getattr(self, name)
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(
                    f"expected a positive integer, got {value!r}", field=name
                )
            if value < 1:
                raise ConfigurationError(
                    f"must be at least 1, got {value}", field=name
                )

        if self.base_delay_ms > self.max_delay_ms:
            raise ConfigurationError(
                f"base_delay_ms ({self.base_delay_ms}) exceeds "
                f"max_delay_ms ({self.max_delay_ms})",
                field="base_delay_ms",
            )

        if not callable(self.wait_fn):
            raise ConfigurationError("must be callable", field="wait_fn")

        if not _is_async_callable(self.async_wait_fn):
            raise ConfigurationError(
                "must be a coroutine function", field="async_wait_fn"
            )

    def merge(self, overrides: "Mapping[str, Any] | BackoffConfig | None") -> "BackoffConfig":
        """Return a new config with `overrides` applied over this one."""
        return merge_config(self, overrides)

    @classmethod
    def no_retry(cls) -> "BackoffConfig":
        """Preset for a single attempt (any Retry ends in exceeded-retries)."""
        return cls(max_attempts=1)

    @classmethod
    def instant(cls, **overrides: Any) -> "BackoffConfig":
        """Preset that never actually waits. Useful in tests."""
        return cls(wait_fn=_no_wait, async_wait_fn=_async_no_wait, **overrides)


DEFAULT_CONFIG = BackoffConfig()

_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(BackoffConfig))


def merge_config(
    defaults: BackoffConfig,
    overrides: Mapping[str, Any] | BackoffConfig | None,
) -> BackoffConfig:
    """
    Merge caller overrides over a base configuration.

    Each recognised field takes the override's value when present and keeps
    the default otherwise. `defaults` is never modified.

    Args:
        defaults: Configuration to start from
        overrides: Mapping of field name to value, a full BackoffConfig
            (used as-is), or None

    Returns:
        A new, validated BackoffConfig

    Raises:
        ConfigurationError: If overrides is not a mapping or a merged value
            is invalid
    """
    if overrides is None:
        return defaults
    if isinstance(overrides, BackoffConfig):
        return overrides
    if not isinstance(overrides, Mapping):
        raise ConfigurationError(
            f"overrides must be a mapping or BackoffConfig, got {type(overrides).__name__}"
        )

    known = {k: v for k, v in overrides.items() if k in _FIELD_NAMES}
    unknown = sorted(set(overrides) - _FIELD_NAMES)
    if unknown:
        logger.debug(f"Ignoring unknown backoff options: {', '.join(unknown)}")

    return dataclasses.replace(defaults, **known)
