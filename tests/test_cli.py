"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import asyncio
import unittest.mock
from datetime import datetime
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

if TYPE_CHECKING:
    from pathlib import Path

import pytest

from weather_dashboard.cli import (
    _open,
    _print_clock,
    cmd_build,
    cmd_info,
    cmd_serve,
    cmd_show,
    cmd_watch,
    create_parser,
    main,
)
from weather_dashboard.dashboard import Dashboard
from weather_dashboard.errors import NotFound
from weather_dashboard.schemas import Unit


def _location_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {"query": None, "lat": None, "lon": None, "unit": None}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "weather-dashboard"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_show_command(self) -> None:
        """Parser accepts show with a query and unit."""
        parser = create_parser()
        args = parser.parse_args(["show", "-q", "Pune", "--unit", "F"])
        assert args.command == "show"
        assert args.query == "Pune"
        assert args.unit == Unit.FAHRENHEIT

    def test_parser_show_defaults(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["show"])
        assert args.query is None
        assert args.lat is None
        assert args.unit is None

    def test_parser_rejects_bad_unit(self) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["show", "--unit", "K"])

    def test_parser_watch_coordinates(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["watch", "--lat", "19.07", "--lon", "72.88"])
        assert args.command == "watch"
        assert (args.lat, args.lon) == (19.07, 72.88)

    def test_parser_build_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["build", "--query", "Mumbai"])
        assert args.command == "build"
        assert args.query == "Mumbai"

    def test_parser_serve_command(self) -> None:
        """Parser accepts serve command with optional --port."""
        parser = create_parser()
        args = parser.parse_args(["serve"])
        assert args.command == "serve"
        assert args.port is None

    def test_parser_serve_with_port(self) -> None:
        """Parser accepts serve --port."""
        parser = create_parser()
        args = parser.parse_args(["serve", "--port", "3000"])
        assert args.port == 3000


class TestOpen:
    """Tests for choosing the first location."""

    def test_coordinates_use_locate(self) -> None:
        dashboard = unittest.mock.Mock()
        dashboard.locate = AsyncMock(return_value=True)
        args = _location_args(lat=19.07, lon=72.88, query="ignored")

        assert asyncio.run(_open(dashboard, args)) is True
        dashboard.locate.assert_awaited_once()
        dashboard.search.assert_not_called()

    def test_query_uses_search(self) -> None:
        dashboard = unittest.mock.Mock()
        dashboard.search = AsyncMock(return_value=False)

        assert asyncio.run(_open(dashboard, _location_args(query="Pune"))) is False
        dashboard.search.assert_awaited_once_with("Pune")

    def test_no_location_boots(self) -> None:
        dashboard = unittest.mock.Mock()
        dashboard.boot = AsyncMock(return_value=None)

        assert asyncio.run(_open(dashboard, _location_args())) is False
        dashboard.boot.assert_awaited_once()


class TestCmdShow:
    """Tests for cmd_show function."""

    def test_success_returns_zero(self) -> None:
        with patch("weather_dashboard.cli._open", new=AsyncMock(return_value=True)):
            assert cmd_show(_location_args(query="Mumbai")) == 0

    def test_failure_returns_one(self) -> None:
        with patch("weather_dashboard.cli._open", new=AsyncMock(return_value=False)):
            assert cmd_show(_location_args(query="Atlantis")) == 1

    def test_unit_applied(self) -> None:
        with (
            patch("weather_dashboard.cli._open", new=AsyncMock(return_value=True)) as mock_open,
        ):
            cmd_show(_location_args(query="Mumbai", unit=Unit.FAHRENHEIT))
            dashboard = mock_open.call_args[0][0]
            assert dashboard.state.unit == Unit.FAHRENHEIT

    def test_default_location_failure_returns_one(self) -> None:
        """When geolocation and the default city both fail, show a notice and exit 1."""
        with (
            patch.object(Dashboard, "boot", new=AsyncMock(side_effect=NotFound("City not found"))),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_show(_location_args()) == 1
            assert "Could not load Mumbai: City not found" in mock_stderr.getvalue()

    def test_clock_wired(self) -> None:
        with patch("weather_dashboard.cli._open", new=AsyncMock(return_value=True)) as mock_open:
            cmd_show(_location_args(query="Mumbai"))
            dashboard = mock_open.call_args[0][0]
            assert dashboard.on_clock is _print_clock


class TestPrintClock:
    """Tests for the watch-mode status line."""

    def test_redraws_in_place(self) -> None:
        with patch("sys.stderr", new=StringIO()) as mock_stderr:
            _print_clock(datetime(2026, 10, 19, 9, 5, 7))
            assert mock_stderr.getvalue() == "\rMon 19 Oct 09:05:07"


class TestCmdWatch:
    """Tests for cmd_watch function."""

    def test_initial_failure_returns_one(self) -> None:
        with patch("weather_dashboard.cli._open", new=AsyncMock(return_value=False)):
            assert cmd_watch(_location_args(query="Atlantis")) == 1

    def test_ctrl_c_stops(self) -> None:
        with (
            patch(
                "weather_dashboard.cli._watch",
                new=unittest.mock.Mock(side_effect=KeyboardInterrupt),
            ),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_watch(_location_args(query="Mumbai")) == 0
            assert "Stopped." in mock_stdout.getvalue()


class TestCmdBuild:
    """Tests for cmd_build function."""

    def test_success_returns_zero(self) -> None:
        with patch("weather_dashboard.cli.build_dashboard") as mock_build:
            mock_build.return_value = {"location": "Mumbai", "output": "site/index.html"}
            assert cmd_build(_location_args(query="Mumbai")) == 0
            kwargs = mock_build.call_args.kwargs
            assert kwargs["query"] == "Mumbai"
            assert kwargs["unit"] == Unit.CELSIUS

    def test_weather_error_returns_one(self) -> None:
        with (
            patch("weather_dashboard.cli.build_dashboard", side_effect=NotFound("City not found")),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_build(_location_args(query="Atlantis")) == 1
            assert "City not found" in mock_stderr.getvalue()


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        args = argparse.Namespace()
        exit_code = cmd_info(args)
        assert exit_code == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        args = argparse.Namespace()

        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(args)
            output = mock_stdout.getvalue()
            assert "Application" in output
            assert "Default location" in output


class TestCmdServe:
    """Tests for cmd_serve function."""

    def test_missing_site_dir_returns_one(self, tmp_path: Path) -> None:
        """Serve returns 1 when site/ doesn't exist."""
        args = argparse.Namespace(port=8080)

        with patch("weather_dashboard.cli.Path", return_value=tmp_path / "no-such-dir"):
            exit_code = cmd_serve(args)
            assert exit_code == 1

    def test_uses_port_from_args(self, tmp_path: Path) -> None:
        """Serve uses --port when provided."""
        (tmp_path / "site").mkdir()
        args = argparse.Namespace(port=9999)

        mock_server = unittest.mock.MagicMock()
        mock_server.__enter__ = unittest.mock.Mock(return_value=mock_server)
        mock_server.__exit__ = unittest.mock.Mock(return_value=False)
        mock_server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)

        with (
            patch("weather_dashboard.cli.Path", side_effect=lambda s: tmp_path / s),
            patch(
                "weather_dashboard.cli.http.server.HTTPServer", return_value=mock_server
            ) as mock_ctor,
        ):
            cmd_serve(args)
            mock_ctor.assert_called_once()
            assert mock_ctor.call_args[0][0] == ("", 9999)

    def test_uses_port_from_settings_when_none(self, tmp_path: Path) -> None:
        """Serve falls back to api_port from settings."""
        (tmp_path / "site").mkdir()
        args = argparse.Namespace(port=None)

        mock_server = unittest.mock.MagicMock()
        mock_server.__enter__ = unittest.mock.Mock(return_value=mock_server)
        mock_server.__exit__ = unittest.mock.Mock(return_value=False)
        mock_server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)

        with (
            patch("weather_dashboard.cli.Path", side_effect=lambda s: tmp_path / s),
            patch(
                "weather_dashboard.cli.http.server.HTTPServer", return_value=mock_server
            ) as mock_ctor,
            patch("weather_dashboard.cli.get_settings") as mock_settings,
        ):
            mock_settings.return_value.api_port = 5555
            mock_settings.return_value.site_dir = "site"
            cmd_serve(args)
            assert mock_ctor.call_args[0][0] == ("", 5555)


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["weather-dashboard"]):
            exit_code = main()
            assert exit_code == 0

    @pytest.mark.parametrize("command", ["show", "watch", "build", "serve", "info"])
    def test_command_dispatch(self, command: str) -> None:
        """Each subcommand reaches its handler."""
        with (
            patch("sys.argv", ["weather-dashboard", command]),
            patch(f"weather_dashboard.cli.cmd_{command}") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["weather-dashboard", "info"]),
            patch("weather_dashboard.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            exit_code = main()
            assert exit_code == 1
