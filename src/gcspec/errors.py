"""Exception taxonomy shared across gcspec."""
from __future__ import annotations


class HarnessError(Exception):
    """Base class for errors raised by the harness."""

    kind = "harness"


class InvalidArgument(HarnessError, TypeError):
    """Raised when a handle is constructed from an unusable target."""

    kind = "invalid_argument"


class AssertionFailed(HarnessError, AssertionError):
    """Raised by the assertion engine when an expectation does not hold."""

    kind = "assertion"


class UnhandledFailure(HarnessError):
    """Wraps any other exception escaping a test body."""

    kind = "unhandled"

    @classmethod
    def wrap(cls, exc: BaseException) -> "UnhandledFailure":
        text = str(exc)
        message = f"{type(exc).__name__}: {text}" if text else type(exc).__name__
        failure = cls(message)
        failure.__cause__ = exc
        return failure
