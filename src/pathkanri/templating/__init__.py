"""Template integration — expose a route registry to kida templates."""

from pathkanri.templating.integration import register_routes, route_globals

__all__ = ["register_routes", "route_globals"]
