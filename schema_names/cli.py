"""Command-line diagnostics for resolving schema entity names."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from schema_names.errors import NameResolutionError
from schema_names.load_config import load_config
from schema_names.load_schema_definition import load_schema_definition
from schema_names.name import Name
from schema_names.resolve_aliases import resolve_aliases_from_map
from schema_names.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)


def _print_name(name: Name, label: str = "full name") -> None:
    print(f"{label}: {name}")
    print(f"  namespace:  {name.namespace or '(none)'}")
    print(f"  short name: {name.short_name()}")


def _init_infra(args: argparse.Namespace) -> ResolverConfig:
    """Load configuration, configure logging and build resolver settings."""
    config = load_config(args.config)
    level = "DEBUG" if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    resolver = ResolverConfig.from_mapping(config)
    if args.relaxed:
        resolver = ResolverConfig(relaxed=True)
    logger.debug("Relaxed validation: %s", resolver.relaxed)
    return resolver


def run_resolve(args: argparse.Namespace, resolver: ResolverConfig) -> int:
    """Resolve a single name given on the command line."""
    result = resolver.resolve(args.name, args.namespace, args.enclosing)
    if result.failure is not None:
        print(f"error: {result.failure}", file=sys.stderr)
        return 1
    _print_name(result.unwrap())
    return 0


def run_check(args: argparse.Namespace, resolver: ResolverConfig) -> int:
    """Resolve the name and aliases of a schema definition file."""
    try:
        schema_map = load_schema_definition(args.file)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    result = resolver.resolve_from_map(args.enclosing, schema_map)
    if result.failure is not None:
        print(f"error: {args.file}: {result.failure}", file=sys.stderr)
        return 1
    name = result.unwrap()
    _print_name(name)

    try:
        aliases = resolve_aliases_from_map(name, schema_map, relaxed=resolver.relaxed)
    except NameResolutionError as exc:
        print(f"error: {args.file}: {exc}", file=sys.stderr)
        return 1
    for alias in aliases:
        _print_name(alias, label="alias")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command-line interface."""
    ap = argparse.ArgumentParser(
        prog="schema-names",
        description="Resolve and validate full names of named schema types.",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--relaxed",
        action="store_true",
        help="Allow a leading dot in namespaces (overrides config)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Resolve a single name")
    resolve.add_argument("name", help="Bare or dotted name")
    resolve.add_argument("--namespace", default="", help="Explicit namespace")
    resolve.add_argument(
        "--enclosing", default="", help="Namespace inherited from the enclosing type"
    )
    resolve.set_defaults(handler=run_resolve)

    check = sub.add_parser("check", help="Resolve the name of a schema definition file")
    check.add_argument("file", type=Path, help="YAML or JSON schema definition")
    check.add_argument(
        "--enclosing", default="", help="Namespace inherited from the enclosing type"
    )
    check.set_defaults(handler=run_check)
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    args = build_parser().parse_args(argv)
    resolver = _init_infra(args)
    return args.handler(args, resolver)


if __name__ == "__main__":
    raise SystemExit(main())
