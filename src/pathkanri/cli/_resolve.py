"""Locate a route registry from a ``module[:attribute]`` target.

The target may name a ready-made ``RouteRegistry`` or a bare route map.
A bare map is wrapped with ``create_route_registry``, picking up the
module's ``BASE_URL`` the way the ``pathkanri init`` stub declares it.
"""

import importlib
from collections.abc import Mapping
from types import ModuleType

from pathkanri.routing.registry import RouteRegistry, create_route_registry

# Looked up in order when the target has no ":attribute" part
DEFAULT_ATTRIBUTES = ("registry", "ROUTES")


def resolve_registry(target: str) -> RouteRegistry:
    """Return the registry named by *target*.

    ``"paths.routes:registry"`` returns the registry as is.
    ``"paths.routes:ROUTES"`` builds one from the mapping, with
    ``paths.routes.BASE_URL`` as base URL when the module defines it.
    ``"paths.routes"`` tries ``registry`` and then ``ROUTES``.

    Raises ``ModuleNotFoundError`` for an unknown module,
    ``AttributeError`` when no usable attribute exists, ``TypeError``
    when the attribute is neither a registry nor a mapping, and
    ``ConfigurationError`` when the mapping or ``BASE_URL`` has the
    wrong shape.
    """
    module_path, _, attr_name = target.partition(":")
    module = importlib.import_module(module_path)

    value = getattr(module, attr_name) if attr_name else _default_attribute(module)

    match value:
        case RouteRegistry():
            return value
        case Mapping():
            return create_route_registry(value, getattr(module, "BASE_URL", ""))
        case _:
            msg = f"{target!r} is a {type(value).__name__}; expected a RouteRegistry or a route map"
            raise TypeError(msg)


def _default_attribute(module: ModuleType) -> object:
    for name in DEFAULT_ATTRIBUTES:
        if hasattr(module, name):
            return getattr(module, name)
    msg = f"Module {module.__name__!r} defines none of {', '.join(DEFAULT_ATTRIBUTES)}"
    raise AttributeError(msg)
