"""Tests for pathkanri.cli._path — ``pathkanri path`` subcommand."""

import sys
import types

import pytest

from pathkanri.cli import main
from pathkanri.routing.registry import create_route_registry


@pytest.fixture
def _fake_routes_module(monkeypatch: pytest.MonkeyPatch) -> None:
    mod = types.ModuleType("_fake_paths")
    mod.registry = create_route_registry(  # type: ignore[attr-defined]
        {"noParams": "/no-params", "example": "/example/{exampleId}/{slug}"},
        "http://example.com",
    )
    monkeypatch.setitem(sys.modules, "_fake_paths", mod)


@pytest.mark.usefixtures("_fake_routes_module")
class TestPathCommand:
    def test_static(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["path", "_fake_paths", "noParams"])

        assert capsys.readouterr().out == "/no-params\n"

    def test_params_and_query(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "path",
                "_fake_paths",
                "example",
                "-p",
                "exampleId=1",
                "-p",
                "slug=abc",
                "-q",
                "page=1",
                "--query",
                "type=fire",
            ]
        )

        assert capsys.readouterr().out == "/example/1/abc/?page=1&type=fire\n"

    def test_full(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["path", "_fake_paths", "noParams", "--full", "-q", "page=1"])

        assert capsys.readouterr().out == "http://example.com/no-params/?page=1\n"

    def test_missing_params_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["path", "_fake_paths", "example"])

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Missing required parameters" in err
        assert "[NAME: example]" in err

    def test_unknown_route_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["path", "_fake_paths", "nope"])

        assert exc_info.value.code == 1
        assert "Unknown route name" in capsys.readouterr().err

    def test_malformed_pair_exits_two(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["path", "_fake_paths", "example", "-p", "oops"])

        assert exc_info.value.code == 2
        assert "key=value" in capsys.readouterr().err
