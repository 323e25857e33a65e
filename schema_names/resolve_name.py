"""Resolution of a schema entity's full name and namespace."""

import logging

from schema_names.check_identifier import check_full_name
from schema_names.errors import FailureKind
from schema_names.name import Name
from schema_names.resolution_result import NameResolution

logger = logging.getLogger(__name__)


def resolve_name(
    name: str,
    namespace: str | None = "",
    enclosing_namespace: str | None = "",
    *,
    relaxed: bool = False,
) -> NameResolution:
    """Resolve a name against its own and its enclosing namespace.

    A dotted ``name`` is already fully qualified and both namespace arguments
    are ignored. Otherwise ``namespace`` wins over ``enclosing_namespace``.
    """
    index = name.rfind(".")
    if index >= 0:
        full_name = name
        effective = name[:index]
    else:
        effective = namespace or enclosing_namespace or ""
        full_name = f"{effective}.{name}" if effective else name

    problem = check_full_name(full_name, relaxed=relaxed)
    if problem:
        logger.debug("Rejected name %r: %s", full_name, problem)
        return NameResolution.fail(
            FailureKind.INVALID_NAME,
            f"invalid name {full_name!r}: {problem}",
            full_name,
        )

    if relaxed and full_name.startswith("."):
        logger.debug("Accepted leading dot in namespace of %r", full_name)
    return NameResolution.success(Name(full_name=full_name, namespace=effective))
