"""Tests for pathkanri.config — RegistryConfig frozen dataclass."""

import pytest

from pathkanri.config import RegistryConfig


class TestRegistryConfig:
    def test_defaults(self) -> None:
        cfg = RegistryConfig()

        assert cfg.base_url == ""
        assert cfg.cache_templates is True

    def test_override(self) -> None:
        cfg = RegistryConfig(base_url="http://example.com", cache_templates=False)

        assert cfg.base_url == "http://example.com"
        assert cfg.cache_templates is False

    def test_frozen(self) -> None:
        cfg = RegistryConfig()

        with pytest.raises(AttributeError):
            cfg.base_url = "http://other.example"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RegistryConfig(base_url="x") == RegistryConfig(base_url="x")
