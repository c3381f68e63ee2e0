"""
jitter_retry - Outcome Types.

Closed three-way result type interpreted by the retry driver.
"""

from .base import Ok, Err, Retry, Outcome, to_outcome

__all__ = [
    "Ok",
    "Err",
    "Retry",
    "Outcome",
    "to_outcome",
]
