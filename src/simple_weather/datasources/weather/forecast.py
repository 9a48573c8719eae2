"""Current conditions and daily forecast from Open-Meteo Forecast API."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from simple_weather.datasources.weather.client import build_forecast_url
from simple_weather.errors import DecodeError, InvalidCoordinateError, NetworkError
from simple_weather.schemas import Coordinate, ForecastSnapshot
from simple_weather.services.http import session as default_session

logger = logging.getLogger(__name__)


def decode_forecast(raw: bytes | str) -> ForecastSnapshot:
    """
    Decode a forecast response body.

    Fields the model doesn't know about are ignored.

    Raises:
        DecodeError: Malformed JSON, a missing field, a wrong type, or daily
            arrays of different lengths.
    """
    try:
        return ForecastSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"Invalid forecast response: {exc}") from exc


def fetch_forecast(
    lat: float,
    lon: float,
    *,
    session: requests.Session | None = None,
) -> ForecastSnapshot:
    """
    Fetch current conditions and the daily forecast for a coordinate.

    Makes exactly one request; nothing is retried.

    Args:
        lat: Latitude, -90 to 90.
        lon: Longitude, -180 to 180.
        session: HTTP session (defaults to the shared one).

    Raises:
        InvalidCoordinateError: Before any network use, if out of range.
        NetworkError: The request failed at the transport level.
        DecodeError: The body couldn't be decoded into a snapshot.
    """
    try:
        Coordinate(lat=lat, lon=lon)
    except ValidationError as exc:
        raise InvalidCoordinateError(f"Invalid coordinate ({lat}, {lon})") from exc

    url = build_forecast_url(lat, lon)
    http = session or default_session
    logger.debug("GET %s", url)
    try:
        resp = http.get(url)
    except requests.RequestException as exc:
        raise NetworkError(f"Forecast request failed: {exc}") from exc

    if not resp.ok:
        # Some error pages are still decodable; let the decoder decide.
        logger.warning("Forecast API returned HTTP %s for (%s, %s)", resp.status_code, lat, lon)

    return decode_forecast(resp.content)
