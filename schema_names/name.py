"""Data model for a resolved schema entity name."""

from dataclasses import dataclass

from schema_names.namespace_of import short_name_of


@dataclass(frozen=True)
class Name:
    """The canonical identity of a named schema type (record, enum, fixed)."""

    full_name: str
    namespace: str = ""

    def short_name(self) -> str:
        """Return the identifier after the last dot of the full name."""
        return short_name_of(self.full_name)

    def __str__(self) -> str:
        return self.full_name
