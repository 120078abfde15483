"""pathkanri — build URL paths from named route templates.

Keep every URL of a project in one route map and build links by name,
with parameters validated against the template's placeholders.

Basic usage::

    from pathkanri import create_route_registry

    registry = create_route_registry(
        {
            "home": "/",
            "example": "/example/{exampleId}/{slug}",
        },
        base_url="https://example.com",
    )

    registry.get_path("example", {"exampleId": 1, "slug": "abc"})
    # "/example/1/abc"

    registry.get_full_path("example", {"exampleId": 1, "slug": "abc"}, {"page": 2})
    # "https://example.com/example/1/abc/?page=2"

Templates (``pip install pathkanri`` pulls in kida)::

    from pathkanri.templating import register_routes
    register_routes(env, registry)   # {{ path("home") }}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidParameters",
    "MissingParameters",
    "PathKanriError",
    "RegistryConfig",
    "RouteError",
    "RouteRegistry",
    "RouteTemplate",
    "UnknownRoute",
    "create_route_registry",
    "parse_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathkanri`` fast while providing a clean top-level API.
    """
    if name in ("RouteRegistry", "create_route_registry"):
        from pathkanri.routing import registry as _registry

        return getattr(_registry, name)

    if name in ("RouteTemplate", "parse_template"):
        from pathkanri.routing import template as _template

        return getattr(_template, name)

    if name == "RegistryConfig":
        from pathkanri.config import RegistryConfig

        return RegistryConfig

    if name in (
        "ConfigurationError",
        "InvalidParameters",
        "MissingParameters",
        "PathKanriError",
        "RouteError",
        "UnknownRoute",
    ):
        from pathkanri import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
