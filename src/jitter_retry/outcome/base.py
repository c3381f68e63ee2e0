"""
Outcome variants returned by retried operations.

An operation reports exactly one of three results:

- `Ok(value)`: final success, returned to the caller as-is
- `Err(error)`: final failure, returned to the caller as-is, never retried
- `Retry(payload)`: ask the driver to wait and invoke the operation again
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ..exceptions import MalformedOutcomeError, UnwrapError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_retry(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Terminal failure. The driver returns it without retrying."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_retry(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error, wrapping it if it is not an exception."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self)


@dataclass(frozen=True)
class Retry(Generic[T]):
    """Signal that the operation should be invoked again after a delay."""

    payload: T | None = None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return False

    def is_retry(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError(self)


Outcome = Union[Ok[T], Err[E], Retry[T]]


def to_outcome(value: Any, *, legacy_fallback: bool = False) -> Outcome:
    """
    Classify a raw operation result.

    Args:
        value: Whatever the operation returned
        legacy_fallback: Treat anything that is not an outcome as `Ok(value)`
            instead of raising

    Returns:
        The outcome itself, or `Ok(value)` under legacy_fallback

    Raises:
        MalformedOutcomeError: value is not an outcome and legacy_fallback is off
    """
    if isinstance(value, (Ok, Err, Retry)):
        return value
    if legacy_fallback:
        return Ok(value)
    raise MalformedOutcomeError(value)
