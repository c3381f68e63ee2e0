"""
jitter_retry - Retry with Decorrelated Jitter.

Drive an operation that returns Ok, Err or Retry until it settles, waiting a
randomized, growing delay between attempts.
"""

from .outcome import Ok, Err, Retry, Outcome, to_outcome
from .exceptions import (
    BackoffError,
    ConfigurationError,
    MalformedOutcomeError,
    ExceededRetriesError,
    UnwrapError,
)
from .retry import (
    DEFAULT_CONFIG,
    BackoffConfig,
    merge_config,
    calculate_delay,
    call,
    async_call,
    with_backoff,
    async_with_backoff,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Outcomes
    "Ok",
    "Err",
    "Retry",
    "Outcome",
    "to_outcome",
    # Exceptions
    "BackoffError",
    "ConfigurationError",
    "MalformedOutcomeError",
    "ExceededRetriesError",
    "UnwrapError",
    # Retry
    "DEFAULT_CONFIG",
    "BackoffConfig",
    "merge_config",
    "calculate_delay",
    "call",
    "async_call",
    "with_backoff",
    "async_with_backoff",
]
