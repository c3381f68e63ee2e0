"""
Base exception classes for retry operations.

Programming errors (bad configuration, malformed outcomes) are raised.
Retry exhaustion is not raised by the driver; it is returned inside an
`Err` so callers can tell it apart from their own domain errors.
"""

from typing import Any


class BackoffError(Exception):
    """Base exception for all jitter_retry errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(BackoffError):
    """Raised when a configuration value is out of range or the wrong type."""

    def __init__(self, message: str = "Invalid configuration", *, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"[{self.field}] {self.message}"
        return self.message


class MalformedOutcomeError(BackoffError):
    """Raised when an operation returns something other than Ok, Err or Retry."""

    def __init__(self, value: Any, message: str = "Operation returned a non-outcome value"):
        super().__init__(message)
        self.value = value

    def __str__(self) -> str:
        return f"{self.message}: {self.value!r} ({type(self.value).__name__})"


class ExceededRetriesError(BackoffError):
    """The operation kept asking for a retry until the attempt ceiling was hit."""

    def __init__(
        self,
        message: str = "Exceeded max retries",
        *,
        attempts: int = 0,
        last_payload: Any = None,
    ):
        super().__init__(message)
        self.attempts = attempts
        self.last_payload = last_payload

    def __str__(self) -> str:
        return f"{self.message} (attempts: {self.attempts})"


class UnwrapError(BackoffError):
    """Raised when unwrapping an outcome that carries no success value."""

    def __init__(self, outcome: Any, message: str = "Called unwrap() on a non-Ok outcome"):
        super().__init__(message)
        self.outcome = outcome

    def __str__(self) -> str:
        return f"{self.message}: {self.outcome!r}"
