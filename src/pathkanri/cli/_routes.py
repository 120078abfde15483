"""``pathkanri routes`` — list the routes of a registry.

One line per route: the name padded to the longest name, the raw
template, and the placeholder names in parentheses for routes that
take parameters.
"""

import argparse
import sys

from pathkanri.cli._resolve import resolve_registry
from pathkanri.errors import PathKanriError
from pathkanri.routing.template import RouteTemplate


def format_route(route: RouteTemplate, name_width: int) -> str:
    """Render one route, e.g. ``example  /example/{exampleId}/{slug}  (exampleId, slug)``."""
    line = f"{route.name.ljust(name_width)}  {route.template}"
    if route.is_static:
        return line
    return f"{line}  ({', '.join(route.param_names)})"


def run_routes(args: argparse.Namespace) -> None:
    """Print every route of ``args.registry``, then its base URL if set."""
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError, PathKanriError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = registry.routes
    if not routes:
        print("No routes registered.")
        return

    name_width = max(len(route.name) for route in routes)
    for route in routes:
        print(format_route(route, name_width))

    if registry.base_url:
        print()
        print(f"Base URL: {registry.base_url}")
