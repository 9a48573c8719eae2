"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from simple_weather import __version__
from simple_weather.config import get_settings
from simple_weather.date_utils import day_name
from simple_weather.errors import ParseError, UnknownCodeError, WeatherError
from simple_weather.forecaster import ForecastClient
from simple_weather.services.http import create_session
from simple_weather.store import SnapshotStore
from simple_weather.weather_codes import classify
from simple_weather.widget import current_temperature_label, read_latest_snapshot

if TYPE_CHECKING:
    from simple_weather.schemas import ForecastSnapshot


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="simple-weather",
        description="Current weather and daily forecasts from Open-Meteo",
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

    subparsers.add_parser("info", help="Show application info")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch and share the forecast")
    fetch_parser.add_argument(
        "--lat", type=float, default=None, help="Latitude (default: lat from settings)"
    )
    fetch_parser.add_argument(
        "--lon", type=float, default=None, help="Longitude (default: lon from settings)"
    )

    subparsers.add_parser("show", help="Show the last shared forecast")
    subparsers.add_parser("widget", help="Print the widget's temperature label")

    return parser


def get_store() -> SnapshotStore:
    settings = get_settings()
    return SnapshotStore(Path(settings.store_dir), settings.store_namespace)


def _describe(code: int) -> str:
    try:
        return classify(code).description
    except UnknownCodeError:
        return f"Unknown ({code})"


def render_snapshot(snapshot: ForecastSnapshot) -> list[str]:
    """Plain-text lines for a snapshot: current conditions, then one per day."""
    current = snapshot.current
    lines = [
        f"Location: ({snapshot.latitude}, {snapshot.longitude})",
        f"Now: {current.temperature_c}° {_describe(current.weather_code)}",
        f"Wind: {current.wind_speed_ms} m/s  Precipitation: {current.precipitation}",
    ]
    for day in snapshot.daily.forecast_days():
        try:
            name = day_name(day.date)
        except ParseError:
            name = day.date
        lines.append(
            f"{name:<4} {day.max_temp:>5}° / {day.min_temp:>5}°  {_describe(day.weather_code)}"
        )
    return lines


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Store: {Path(settings.store_dir) / settings.store_namespace}")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command: one fetch, shared with the widget."""
    settings = get_settings()
    lat = settings.lat if args.lat is None else args.lat
    lon = settings.lon if args.lon is None else args.lon

    client = ForecastClient(get_store(), session=create_session(timeout=settings.http_timeout))
    try:
        snapshot = client.fetch_forecast(lat, lon)
    except WeatherError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in render_snapshot(snapshot):
        print(line)
    return 0


def cmd_show(_args: argparse.Namespace) -> int:
    """Handle the 'show' command: print the last shared snapshot."""
    snapshot = read_latest_snapshot(get_store())
    if snapshot is None:
        print("No forecast shared yet. Run 'simple-weather fetch' first.", file=sys.stderr)
        return 1
    for line in render_snapshot(snapshot):
        print(line)
    return 0


def cmd_widget(_args: argparse.Namespace) -> int:
    """Handle the 'widget' command."""
    print(current_temperature_label(get_store()))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "show": cmd_show,
        "widget": cmd_widget,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
