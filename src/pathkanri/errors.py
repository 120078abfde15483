"""pathkanri exception hierarchy.

Shared across the registry, the template integration, and the CLI so
every module raises and catches the same types.
"""

from dataclasses import dataclass


def _name_and_uri(route_name: str, template: str) -> str:
    return f"[NAME: {route_name}][URI: {template}]"


def missing_parameters_message(route_name: str, template: str) -> str:
    """Message for a route whose placeholders were not all supplied."""
    return f"Missing required parameters for {_name_and_uri(route_name, template)}."


def invalid_parameters_message(route_name: str, template: str) -> str:
    """Message for a route given the right number of wrongly named parameters."""
    return f"Given parameters are not valid for {_name_and_uri(route_name, template)}."


class PathKanriError(Exception):
    """Base for all pathkanri-specific errors."""


class ConfigurationError(PathKanriError):
    """Raised when a route map or base URL has the wrong shape.

    Typically raised while constructing a ``RouteRegistry``.
    """


@dataclass(frozen=True, slots=True)
class RouteError(PathKanriError):
    """A failure to build a path for a named route.

    Carries the route name and the raw, unsubstituted template so the
    failure can be traced back to the route map entry.
    """

    route_name: str
    template: str = ""

    def __str__(self) -> str:
        return _name_and_uri(self.route_name, self.template)

    def __reduce__(self) -> tuple[type["RouteError"], tuple[str, ...]]:
        # args is empty for keyword construction
        return (type(self), (self.route_name, self.template))


class UnknownRoute(RouteError):  # noqa: N818
    """The route name is not a key of the registry's route map."""

    def __init__(self, route_name: str) -> None:
        super().__init__(route_name=route_name)

    def __str__(self) -> str:
        return f"Unknown route name [NAME: {self.route_name}]."

    def __reduce__(self) -> tuple[type["UnknownRoute"], tuple[str]]:
        return (UnknownRoute, (self.route_name,))


class MissingParameters(RouteError):  # noqa: N818
    """No parameters, or a parameter count that differs from the placeholder count."""

    def __str__(self) -> str:
        return missing_parameters_message(self.route_name, self.template)


class InvalidParameters(RouteError):  # noqa: N818
    """The parameter count matches but some names are not placeholders."""

    def __str__(self) -> str:
        return invalid_parameters_message(self.route_name, self.template)
