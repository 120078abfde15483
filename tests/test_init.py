"""Tests for the lazy top-level pathkanri API."""

import pytest

import pathkanri
from pathkanri.errors import MissingParameters
from pathkanri.routing.registry import RouteRegistry


class TestPublicAPI:
    def test_all_names_resolve(self) -> None:
        for name in pathkanri.__all__:
            assert getattr(pathkanri, name) is not None

    def test_lazy_attributes_are_the_real_objects(self) -> None:
        assert pathkanri.RouteRegistry is RouteRegistry
        assert pathkanri.MissingParameters is MissingParameters

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'nope'"):
            pathkanri.nope  # noqa: B018

    def test_end_to_end(self) -> None:
        registry = pathkanri.create_route_registry({"home": "/"}, "http://example.com")
        assert registry.get_full_path("home") == "http://example.com/"
