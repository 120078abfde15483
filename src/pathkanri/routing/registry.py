"""Route registry — named URI templates resolved into concrete paths.

The route map and configuration are fixed at construction. Every
lookup runs the same pipeline: parse the template, validate the
parameters, substitute them, then compose query string and base URL.
"""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pathkanri.config import RegistryConfig
from pathkanri.errors import ConfigurationError, MissingParameters, UnknownRoute
from pathkanri.routing.compose import with_base_url, with_query_params
from pathkanri.routing.params import validate_params
from pathkanri.routing.substitute import substitute
from pathkanri.routing.template import RouteTemplate

logger = logging.getLogger("pathkanri.routing")


class RouteRegistry:
    """Immutable mapping of route names to URI templates.

    Usage::

        registry = RouteRegistry(
            {"home": "/", "example": "/example/{exampleId}/{slug}"},
            config=RegistryConfig(base_url="https://example.com"),
        )
        registry.get_path("example", {"exampleId": 1, "slug": "abc"})
        # "/example/1/abc"
        registry.get_full_path("home", query_params={"page": 2})
        # "https://example.com//?page=2"

    Holds no mutable state after ``__init__``, so one instance can be
    shared freely between threads.
    """

    __slots__ = ("_config", "_parsed", "_routes")

    def __init__(
        self,
        route_map: Mapping[str, str],
        config: RegistryConfig | None = None,
    ) -> None:
        config = config or RegistryConfig()
        _check_shape(route_map, config)

        self._routes: Mapping[str, str] = MappingProxyType(dict(route_map))
        self._config = config
        self._parsed: Mapping[str, RouteTemplate] | None = None
        if config.cache_templates:
            self._parsed = MappingProxyType(
                {name: RouteTemplate.from_template(name, tpl) for name, tpl in self._routes.items()}
            )

        logger.debug(
            "Route registry created with %d routes (base_url=%r)",
            len(self._routes),
            config.base_url,
        )

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def routes(self) -> tuple[RouteTemplate, ...]:
        """Return every route in map order, parsed.

        Useful for introspection (``pathkanri routes``) and documentation.
        """
        return tuple(self._lookup(name) for name in self._routes)

    def param_names(self, route_name: str) -> tuple[str, ...]:
        """Return the placeholder names of *route_name*, left to right."""
        return self._lookup(route_name).param_names

    def get_path(
        self,
        route_name: str,
        params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> str:
        """Build the path for *route_name*, without the base URL.

        get_path("example", {"exampleId": 1, "slug": "abcd"}) -> "/example/1/abcd"

        Raises ``UnknownRoute`` if the name is not registered.
        Raises ``MissingParameters`` if *params* is None or has the wrong
        number of keys for a template with placeholders.
        Raises ``InvalidParameters`` if the count is right but a key is
        not a placeholder name.

        *params* is ignored entirely for templates without placeholders.
        """
        route = self._lookup(route_name)

        if route.is_static:
            return with_query_params(route.template, query_params)

        if params is None:
            raise MissingParameters(route_name=route_name, template=route.template)

        validate_params(route.param_names, params, route_name, route.template)
        path = substitute(route.template, route.param_names, params)
        return with_query_params(path, query_params)

    def get_full_path(
        self,
        route_name: str,
        params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> str:
        """Build the path for *route_name* and prefix it with the base URL.

        Same rules and errors as ``get_path()``.
        """
        return with_base_url(self.base_url, self.get_path(route_name, params, query_params))

    def _lookup(self, route_name: str) -> RouteTemplate:
        if self._parsed is not None:
            try:
                return self._parsed[route_name]
            except KeyError:
                raise UnknownRoute(route_name) from None

        try:
            template = self._routes[route_name]
        except KeyError:
            raise UnknownRoute(route_name) from None
        return RouteTemplate.from_template(route_name, template)

    def __contains__(self, route_name: object) -> bool:
        return route_name in self._routes

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteRegistry({len(self._routes)} routes, base_url={self.base_url!r})"


def create_route_registry(
    route_map: Mapping[str, str],
    base_url: str = "",
    *,
    cache_templates: bool = True,
) -> RouteRegistry:
    """Create a registry from a route map and an optional base URL.

    Shorthand for ``RouteRegistry(route_map, RegistryConfig(...))``.
    """
    config = RegistryConfig(base_url=base_url, cache_templates=cache_templates)
    return RouteRegistry(route_map, config)


def _check_shape(route_map: Mapping[str, str], config: RegistryConfig) -> None:
    """Reject route maps and base URLs that are not made of strings."""
    if not isinstance(route_map, Mapping):
        msg = f"Route map must be a mapping, got {type(route_map).__name__}."
        raise ConfigurationError(msg)

    for name, template in route_map.items():
        if not isinstance(name, str):
            msg = f"Route names must be strings, got {name!r}."
            raise ConfigurationError(msg)
        if not isinstance(template, str):
            msg = f"Template for route {name!r} must be a string, got {type(template).__name__}."
            raise ConfigurationError(msg)

    if not isinstance(config.base_url, str):
        msg = f"Base URL must be a string, got {type(config.base_url).__name__}."
        raise ConfigurationError(msg)
