"""Kida environment binding for route registries.

Registers ``path()`` and ``full_path()`` as template globals so pages
link to named routes instead of hard-coding URLs::

    <a href="{{ path("example", {"exampleId": item.id, "slug": item.slug}) }}">
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from pathkanri.routing.registry import RouteRegistry


def route_globals(registry: RouteRegistry) -> dict[str, Callable[..., Any]]:
    """Return the template globals backed by *registry*."""
    return {
        "path": registry.get_path,
        "full_path": registry.get_full_path,
    }


def register_routes(env: Environment, registry: RouteRegistry) -> Environment:
    """Add the route globals to *env* and return it.

    Overrides any existing ``path`` or ``full_path`` global.
    """
    for name, value in route_globals(registry).items():
        env.add_global(name, value)
    return env
