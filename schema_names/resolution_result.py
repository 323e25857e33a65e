"""Data model for the outcome of resolving a schema entity name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from schema_names.errors import FailureKind, NameFailure, error_for
from schema_names.name import Name


@dataclass(frozen=True)
class NameResolution:
    """Either a resolved Name or the failure that prevented it."""

    name: Name | None = None
    failure: NameFailure | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.failure is None):
            raise ValueError("NameResolution needs exactly one of name or failure")

    @classmethod
    def success(cls, name: Name) -> NameResolution:
        """Build a successful resolution."""
        return cls(name=name)

    @classmethod
    def fail(cls, kind: FailureKind, message: str, subject: str) -> NameResolution:
        """Build a failed resolution."""
        return cls(failure=NameFailure(kind=kind, message=message, subject=subject))

    @property
    def ok(self) -> bool:
        """Whether a name was resolved."""
        return self.failure is None

    @property
    def kind(self) -> FailureKind | None:
        """Failure tag, or None when resolution succeeded."""
        return self.failure.kind if self.failure else None

    def unwrap(self) -> Name:
        """Return the resolved name, raising the matching error on failure."""
        if self.failure is not None:
            raise error_for(self.failure)
        return cast(Name, self.name)
