"""
jitter_retry - Exception Hierarchy.

Errors raised for misuse, plus the synthetic exhaustion error returned
inside `Err`.
"""

from .base import (
    BackoffError,
    ConfigurationError,
    MalformedOutcomeError,
    ExceededRetriesError,
    UnwrapError,
)

__all__ = [
    "BackoffError",
    "ConfigurationError",
    "MalformedOutcomeError",
    "ExceededRetriesError",
    "UnwrapError",
]
