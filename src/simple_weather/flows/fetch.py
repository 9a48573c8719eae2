"""
Prefect flow that refreshes the shared weather snapshot.

Each run is one location update: fetch once, write the shared store, done.
Retries are deliberately off; a failed run leaves the previous snapshot.

Run locally:
    python -m simple_weather.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m simple_weather.flows.fetch
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from simple_weather.config import get_settings
from simple_weather.forecaster import ForecastClient
from simple_weather.services.http import create_session
from simple_weather.store import SnapshotStore


def build_client() -> ForecastClient:
    """Forecast client wired to the configured store and timeout."""
    settings = get_settings()
    store = SnapshotStore(Path(settings.store_dir), settings.store_namespace)
    return ForecastClient(store, session=create_session(timeout=settings.http_timeout))


@task(name="fetch-weather", retries=0)
def fetch_weather(lat: float, lon: float) -> dict[str, Any]:
    """Fetch a snapshot from Open-Meteo and share it with the widget."""
    snapshot = build_client().fetch_forecast(lat, lon)
    return snapshot.model_dump(by_alias=True)


@flow(name="refresh-weather", log_prints=True)
def refresh_weather(lat: float | None = None, lon: float | None = None) -> dict[str, Any]:
    """Refresh the shared snapshot for a coordinate (defaults from settings)."""
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon

    print(f"Fetching weather for ({lat}, {lon})...")
    weather = fetch_weather(lat, lon)
    print(f"Current temperature: {weather['current']['temperature_2m']}°")
    return weather


if __name__ == "__main__":
    refresh_weather()
