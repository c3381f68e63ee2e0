"""
Decorrelated-jitter delay calculation and the retry driver.
"""

import functools
import logging
import random
from typing import Any, Awaitable, Callable, Mapping, ParamSpec

from .config import DEFAULT_CONFIG, BackoffConfig, merge_config
from ..exceptions import ExceededRetriesError
from ..outcome import Err, Outcome, Retry, to_outcome

logger = logging.getLogger(__name__)

P = ParamSpec("P")

# 2 ** attempt stops mattering long before this; keeps the integer small.
MAX_EXPONENT = 1000

Overrides = Mapping[str, Any] | BackoffConfig | None
OnRetry = Callable[[int, Any, int], None]


def calculate_delay(attempt: int, config: BackoffConfig = DEFAULT_CONFIG) -> int:
    """
    Calculate the delay before the next attempt using decorrelated jitter.

        t     = min(max, base * 2 ** attempt)
        sleep = t / 2 + randint(1, t / 2)
        sleep = min(max, randint(1, sleep * 3) + base)

    Args:
        attempt: Zero-based attempt number
        config: Retry configuration

    Returns:
        Delay in milliseconds, within [base_delay_ms, max_delay_ms]
    """
    if attempt < 0:
        raise ValueError(f"attempt must be >= 0, got {attempt}")

    randint = config.rng.randint if config.rng is not None else random.randint

    capped_attempt = min(MAX_EXPONENT, attempt)

    # Exponential backoff, capped at max
    t = min(config.max_delay_ms, config.base_delay_ms * 2**capped_attempt)
    # Round half up; t >= 1 so half >= 1
    half = (t + 1) // 2

    sleep = half + randint(1, half)
    sleep = randint(1, sleep * 3) + config.base_delay_ms

    return min(config.max_delay_ms, sleep)


def _exceeded(attempts: int, payload: Any, config: BackoffConfig) -> Err:
    logger.debug(
        f"Giving up after {attempts}/{config.max_attempts} attempts"
    )
    return Err(ExceededRetriesError(attempts=attempts, last_payload=payload))


def _schedule_retry(
    attempt: int,
    payload: Any,
    config: BackoffConfig,
    on_retry: OnRetry | None,
) -> int:
    delay = calculate_delay(attempt, config)
    if on_retry:
        on_retry(attempt, payload, delay)
    logger.debug(
        f"Retry {attempt + 1}/{config.max_attempts - 1}: waiting {delay}ms"
    )
    return delay


def call(
    operation: Callable[[], Any],
    overrides: Overrides = None,
    *,
    on_retry: OnRetry | None = None,
) -> Outcome:
    """
    Invoke `operation` until it returns Ok or Err, or the attempts run out.

    Args:
        operation: Niladic callable returning Ok, Err or Retry
        overrides: Options merged over DEFAULT_CONFIG, or a full BackoffConfig
        on_retry: Optional callback(attempt, payload, delay_ms) called before
            each wait

    Returns:
        The operation's Ok or Err, or Err(ExceededRetriesError) when every
        allowed attempt asked for a retry

    Raises:
        MalformedOutcomeError: operation returned a non-outcome value and
            legacy_fallback is off
    """
    config = merge_config(DEFAULT_CONFIG, overrides)

    attempt = 0
    payload = None
    while attempt < config.max_attempts:
        outcome = to_outcome(operation(), legacy_fallback=config.legacy_fallback)
        if not isinstance(outcome, Retry):
            return outcome

        payload = outcome.payload
        # No wait after the last allowed attempt
        if attempt + 1 < config.max_attempts:
            config.wait_fn(_schedule_retry(attempt, payload, config, on_retry))
        attempt += 1

    return _exceeded(attempt, payload, config)


async def async_call(
    operation: Callable[[], Awaitable[Any]],
    overrides: Overrides = None,
    *,
    on_retry: OnRetry | None = None,
) -> Outcome:
    """
    Async counterpart of `call`.

    `operation` returns an awaitable of an outcome; waits go through
    `config.async_wait_fn`.
    """
    config = merge_config(DEFAULT_CONFIG, overrides)

    attempt = 0
    payload = None
    while attempt < config.max_attempts:
        outcome = to_outcome(await operation(), legacy_fallback=config.legacy_fallback)
        if not isinstance(outcome, Retry):
            return outcome

        payload = outcome.payload
        if attempt + 1 < config.max_attempts:
            await config.async_wait_fn(_schedule_retry(attempt, payload, config, on_retry))
        attempt += 1

    return _exceeded(attempt, payload, config)


def with_backoff(
    config: Overrides = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Any]], Callable[P, Outcome]]:
    """
    Decorator for synchronous functions that return an outcome.

    Args:
        config: Options merged over DEFAULT_CONFIG, or a full BackoffConfig
        on_retry: Optional callback(attempt, payload, delay_ms) called before
            each wait

    Returns:
        Decorated function returning the final outcome
    """
    # Merge once so bad options fail at decoration time
    resolved = merge_config(DEFAULT_CONFIG, config)

    def decorator(func: Callable[P, Any]) -> Callable[P, Outcome]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome:
            return call(lambda: func(*args, **kwargs), resolved, on_retry=on_retry)

        return wrapper

    return decorator


def async_with_backoff(
    config: Overrides = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Awaitable[Any]]], Callable[P, Awaitable[Outcome]]]:
    """
    Decorator for async functions that return an outcome.

    Args:
        config: Options merged over DEFAULT_CONFIG, or a full BackoffConfig
        on_retry: Optional callback(attempt, payload, delay_ms) called before
            each wait

    Returns:
        Decorated async function returning the final outcome
    """
    resolved = merge_config(DEFAULT_CONFIG, config)

    def decorator(func: Callable[P, Awaitable[Any]]) -> Callable[P, Awaitable[Outcome]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome:
            return await async_call(
                lambda: func(*args, **kwargs), resolved, on_retry=on_retry
            )

        return wrapper

    return decorator
