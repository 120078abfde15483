"""``pathkanri path`` — build one path from the command line."""

import argparse
import sys

from pathkanri.cli._resolve import resolve_registry
from pathkanri.errors import PathKanriError


def _parse_pairs(pairs: list[str] | None, flag: str) -> dict[str, str] | None:
    """Turn ``["key=value", ...]`` into a dict. None when no pairs were given."""
    if not pairs:
        return None
    result: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: {flag} expects key=value, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        result[key] = value
    return result


def run_path(args: argparse.Namespace) -> None:
    """Resolve the registry, build the requested path, and print it."""
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError, PathKanriError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    params = _parse_pairs(args.param, "--param")
    query_params = _parse_pairs(args.query, "--query")
    build = registry.get_full_path if args.full else registry.get_path

    try:
        print(build(args.name, params, query_params))
    except PathKanriError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
