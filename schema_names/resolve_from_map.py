"""Resolution of a name from a generic schema-definition mapping."""

from collections.abc import Mapping
from typing import Any

from schema_names.errors import FailureKind
from schema_names.resolution_result import NameResolution
from schema_names.resolve_name import resolve_name


def resolve_from_map(
    enclosing_namespace: str | None,
    schema_map: Mapping[str, Any],
    *,
    relaxed: bool = False,
) -> NameResolution:
    """Resolve the ``name`` and ``namespace`` entries of a schema definition."""
    if "name" not in schema_map:
        return NameResolution.fail(
            FailureKind.MISSING_NAME_FIELD,
            "schema definition has no 'name' field",
            "name",
        )
    name = schema_map["name"]
    if not isinstance(name, str):
        return NameResolution.fail(
            FailureKind.MALFORMED_NAME_FIELD,
            f"'name' field must be a string; received: {type(name).__name__}",
            "name",
        )
    if not name:
        return NameResolution.fail(
            FailureKind.MALFORMED_NAME_FIELD,
            "'name' field must be a non-empty string",
            "name",
        )

    # A null namespace (JSON/YAML null) counts as absent.
    namespace = schema_map.get("namespace")
    if namespace is not None and not isinstance(namespace, str):
        kind = type(namespace).__name__
        return NameResolution.fail(
            FailureKind.MALFORMED_NAME_FIELD,
            f"'namespace' field must be a string; received: {kind}",
            "namespace",
        )

    return resolve_name(
        name, namespace or "", enclosing_namespace or "", relaxed=relaxed
    )
