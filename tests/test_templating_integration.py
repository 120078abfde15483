"""Tests for pathkanri.templating — kida environment globals."""

from kida import Environment

from pathkanri.routing.registry import create_route_registry
from pathkanri.templating import register_routes, route_globals

ROUTES = {
    "home": "/",
    "example": "/example/{exampleId}/{slug}",
    "login": "/login",
}


def _make_env() -> Environment:
    registry = create_route_registry(ROUTES, "http://example.com")
    return register_routes(Environment(autoescape=False), registry)


class TestRouteGlobals:
    def test_bound_to_registry(self) -> None:
        registry = create_route_registry(ROUTES)
        globals_ = route_globals(registry)
        assert set(globals_) == {"path", "full_path"}
        assert globals_["path"]("login") == "/login"


class TestRegisterRoutes:
    def test_returns_env(self) -> None:
        env = Environment()
        assert register_routes(env, create_route_registry(ROUTES)) is env

    def test_static_path(self) -> None:
        tpl = _make_env().from_string('{{ path("login") }}')
        assert tpl.render().strip() == "/login"

    def test_path_with_params(self) -> None:
        tpl = _make_env().from_string('{{ path("example", params) }}')
        rendered = tpl.render({"params": {"exampleId": 1, "slug": "abc"}})
        assert rendered.strip() == "/example/1/abc"

    def test_full_path(self) -> None:
        tpl = _make_env().from_string('{{ full_path("login") }}')
        assert tpl.render().strip() == "http://example.com/login"

    def test_path_with_query(self) -> None:
        tpl = _make_env().from_string('{{ path("login", params, query) }}')
        rendered = tpl.render({"params": None, "query": {"next": "home"}})
        assert rendered.strip() == "/login/?next=home"
