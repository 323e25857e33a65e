"""Resolution of the alternate names a schema entity may be known by."""

from collections.abc import Iterable, Mapping
from typing import Any

from schema_names.errors import FailureKind, MalformedNameFieldError, NameFailure
from schema_names.name import Name
from schema_names.resolve_name import resolve_name


def resolve_aliases(
    owner: Name, aliases: Iterable[str], *, relaxed: bool = False
) -> tuple[Name, ...]:
    """Resolve aliases relative to the namespace of the entity that declares them.

    Raises the matching NameResolutionError on the first invalid alias.
    """
    return tuple(
        resolve_name(alias, "", owner.namespace, relaxed=relaxed).unwrap()
        for alias in aliases
    )


def resolve_aliases_from_map(
    owner: Name, schema_map: Mapping[str, Any], *, relaxed: bool = False
) -> tuple[Name, ...]:
    """Resolve the optional ``aliases`` entry of a schema definition."""
    aliases = schema_map.get("aliases")
    if aliases is None:
        return ()
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise MalformedNameFieldError(
            NameFailure(
                kind=FailureKind.MALFORMED_NAME_FIELD,
                message="'aliases' field must be a list of strings",
                subject="aliases",
            )
        )
    return resolve_aliases(owner, aliases, relaxed=relaxed)
