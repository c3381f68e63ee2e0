"""Tests for exceptions module - behavior focused."""

import pytest
from jitter_retry.exceptions import (
    BackoffError,
    ConfigurationError,
    MalformedOutcomeError,
    ExceededRetriesError,
    UnwrapError,
)
from jitter_retry.outcome import Ok


class TestExceptionStringRepresentation:
    """Test that exception string includes useful context."""

    def test_str_includes_message(self):
        """String representation should include the message."""
        error = BackoffError("Something went wrong")
        assert "Something went wrong" in str(error)

    def test_configuration_error_includes_field(self):
        """Field name is shown when set."""
        error = ConfigurationError("must be at least 1", field="max_attempts")
        assert str(error) == "[max_attempts] must be at least 1"

    def test_configuration_error_without_field(self):
        """Without a field only the message is shown."""
        assert str(ConfigurationError()) == "Invalid configuration"

    def test_malformed_outcome_includes_value_and_type(self):
        """The offending value and its type are shown."""
        result = str(MalformedOutcomeError(42))

        assert "42" in result
        assert "int" in result

    def test_exceeded_retries_includes_attempts(self):
        """Attempt count is shown."""
        assert "3" in str(ExceededRetriesError(attempts=3))

    def test_unwrap_error_includes_outcome(self):
        """The outcome is shown."""
        assert "Ok" in str(UnwrapError(Ok(1)))


class TestExceededRetriesExtras:
    """Test ExceededRetriesError specific behavior."""

    def test_fields_are_stored(self):
        """attempts and last_payload are accessible."""
        error = ExceededRetriesError(attempts=5, last_payload="p")

        assert error.attempts == 5
        assert error.last_payload == "p"

    def test_defaults(self):
        """Defaults are zero attempts and no payload."""
        error = ExceededRetriesError()

        assert error.attempts == 0
        assert error.last_payload is None


class TestExceptionInheritance:
    """Test that all exceptions inherit from BackoffError."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError(),
            MalformedOutcomeError(None),
            ExceededRetriesError(),
            UnwrapError(None),
        ],
    )
    def test_inherits_from_base(self, error):
        """All exception types should be catchable as BackoffError."""
        assert isinstance(error, BackoffError)
