"""Immutable resolver settings threaded through schema parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from schema_names.resolution_result import NameResolution
from schema_names.resolve_from_map import resolve_from_map
from schema_names.resolve_name import resolve_name


@dataclass(frozen=True)
class ResolverConfig:
    """Validation settings fixed once when a schema model is built."""

    relaxed: bool = False

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> ResolverConfig:
        """Build settings from a loaded configuration dictionary."""
        validation = config.get("validation") or {}
        return cls(relaxed=bool(validation.get("relaxed", False)))

    def resolve(
        self,
        name: str,
        namespace: str | None = "",
        enclosing_namespace: str | None = "",
    ) -> NameResolution:
        """Resolve a name with these settings."""
        return resolve_name(name, namespace, enclosing_namespace, relaxed=self.relaxed)

    def resolve_from_map(
        self, enclosing_namespace: str | None, schema_map: Mapping[str, Any]
    ) -> NameResolution:
        """Resolve a schema-definition mapping with these settings."""
        return resolve_from_map(enclosing_namespace, schema_map, relaxed=self.relaxed)
