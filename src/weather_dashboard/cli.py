"""
Command-line interface for the weather dashboard.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import http.server
import logging
import sys
from datetime import datetime
from pathlib import Path

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.dashboard import Dashboard, StaticGeolocator
from weather_dashboard.errors import WeatherError
from weather_dashboard.flows.build import build_dashboard
from weather_dashboard.renderers.console import format_dashboard
from weather_dashboard.schemas import Coordinates, DashboardView, Unit

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Configure root logging from settings; ``--debug`` forces DEBUG."""
    settings = get_settings()
    level = "DEBUG" if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--query", "-q", type=str, default=None, help="City name to search")
    parser.add_argument("--lat", type=float, default=None, help="Latitude")
    parser.add_argument("--lon", type=float, default=None, help="Longitude")
    parser.add_argument(
        "--unit",
        type=Unit,
        choices=list(Unit),
        default=None,
        help="Temperature unit (default: from settings)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="Personal weather dashboard with forecast advisories",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_parser = subparsers.add_parser("show", help="Print the dashboard once")
    _add_location_args(show_parser)

    watch_parser = subparsers.add_parser("watch", help="Live dashboard with periodic refresh")
    _add_location_args(watch_parser)

    build_parser = subparsers.add_parser("build", help="Build the static dashboard page")
    _add_location_args(build_parser)

    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def _print_view(view: DashboardView) -> None:
    print(format_dashboard(view))
    print()


def _print_notice(message: str) -> None:
    print(f"» {message}", file=sys.stderr)


def _print_clock(now: datetime) -> None:
    """Redraw the status line with the local time."""
    print(f"\r{now:%a %d %b %H:%M:%S}", end="", file=sys.stderr, flush=True)


def _make_dashboard(args: argparse.Namespace) -> Dashboard:
    settings = get_settings()
    geolocator = StaticGeolocator.from_settings(settings)
    if args.lat is not None and args.lon is not None:
        geolocator = StaticGeolocator(Coordinates(lat=args.lat, lon=args.lon))
    dashboard = Dashboard(
        settings,
        geolocator=geolocator,
        notify=_print_notice,
        render=_print_view,
        on_clock=_print_clock,
    )
    if args.unit is not None:
        dashboard.state.set_unit(args.unit)
    return dashboard


async def _open(dashboard: Dashboard, args: argparse.Namespace) -> bool:
    """Load the first location: explicit coordinates, a search, or boot."""
    if args.lat is not None and args.lon is not None:
        return await dashboard.locate()
    if args.query:
        return await dashboard.search(args.query)
    try:
        return await dashboard.boot() is not None
    except WeatherError as exc:
        dashboard.notify(f"Could not load {dashboard.settings.default_location}: {exc}")
        return False


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    dashboard = _make_dashboard(args)
    ok = asyncio.run(_open(dashboard, args))
    return 0 if ok else 1


async def _watch(dashboard: Dashboard, args: argparse.Namespace) -> bool:
    if not await _open(dashboard, args):
        return False
    dashboard.start()
    try:
        await dashboard.wait()
    finally:
        await dashboard.stop()
    return True


def cmd_watch(args: argparse.Namespace) -> int:
    """Handle the 'watch' command: show, then refresh until Ctrl+C."""
    dashboard = _make_dashboard(args)
    try:
        ok = asyncio.run(_watch(dashboard, args))
    except KeyboardInterrupt:
        print("\nStopped.")
        return 0
    return 0 if ok else 1


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: write site/index.html."""
    settings = get_settings()
    try:
        result = build_dashboard(
            query=args.query,
            lat=args.lat,
            lon=args.lon,
            unit=args.unit or settings.unit,
        )
    except WeatherError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Built dashboard for {result['location']}: {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'weather-dashboard build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Default location: {settings.default_location}")
    print(f"Unit: {settings.unit.suffix}")
    print(f"Refresh interval: {settings.refresh_interval_minutes} min")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "show": cmd_show,
        "watch": cmd_watch,
        "build": cmd_build,
        "serve": cmd_serve,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
