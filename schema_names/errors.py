"""Failure kinds and exceptions raised by name resolution."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Closed set of reasons a name cannot be resolved."""

    INVALID_NAME = "invalid_name"
    MISSING_NAME_FIELD = "missing_name_field"
    MALFORMED_NAME_FIELD = "malformed_name_field"


@dataclass(frozen=True)
class NameFailure:
    """Diagnostic for a failed resolution."""

    kind: FailureKind
    message: str
    subject: str  # offending identifier or field name

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class NameResolutionError(ValueError):
    """Base error for a name that could not be resolved."""

    def __init__(self, failure: NameFailure) -> None:
        """Wrap a failure so it can be raised."""
        super().__init__(str(failure))
        self.failure = failure


class InvalidNameError(NameResolutionError):
    """The name or namespace violates identifier syntax."""


class MissingNameFieldError(NameResolutionError):
    """The schema definition has no ``name`` entry."""


class MalformedNameFieldError(NameResolutionError):
    """The ``name``, ``namespace`` or ``aliases`` entry has the wrong type."""


_ERRORS: dict[FailureKind, type[NameResolutionError]] = {
    FailureKind.INVALID_NAME: InvalidNameError,
    FailureKind.MISSING_NAME_FIELD: MissingNameFieldError,
    FailureKind.MALFORMED_NAME_FIELD: MalformedNameFieldError,
}


def error_for(failure: NameFailure) -> NameResolutionError:
    """Build the exception matching a failure's kind."""
    return _ERRORS[failure.kind](failure)
