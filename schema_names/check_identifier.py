"""Identifier syntax rules for names and namespaces."""

import re

from schema_names.namespace_of import namespace_of

FIRST_CHAR_RE = re.compile(r"[A-Za-z_]")
# Anything outside ASCII letters, digits and underscore.
INVALID_CHAR_RE = re.compile(r"[^A-Za-z0-9_]")


def check_component(component: str) -> str | None:
    """Return the first rule a single dotted component breaks, or None."""
    if not component:
        return "cannot be empty"
    if not FIRST_CHAR_RE.match(component[0]):
        return f"must start with a letter or underscore; received: {component!r}"
    match = INVALID_CHAR_RE.search(component, 1)
    if match:
        return f"must not contain character {match.group(0)!r}; received: {component!r}"
    return None


def check_full_name(full_name: str, *, relaxed: bool = False) -> str | None:
    """Validate every dotted component of a full name.

    Namespace components are checked first, then the short name. With
    ``relaxed`` the namespace may begin with a single leading dot; everything
    after it is still checked strictly.
    """
    body = full_name[1:] if relaxed and full_name.startswith(".") else full_name
    *namespace_parts, short_name = body.split(".")
    for component in namespace_parts:
        problem = check_component(component)
        if problem:
            return f"namespace {namespace_of(full_name)!r} {problem}"

    problem = check_component(short_name)
    if problem:
        return f"name {short_name!r} {problem}"
    return None
