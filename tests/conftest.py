"""Shared fixtures: a realistic Open-Meteo forecast response."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import Mock

import pytest


def make_payload(weather_code: int = 61) -> dict[str, Any]:
    """Forecast response shaped like Open-Meteo's, including fields we ignore."""
    return {
        "latitude": 59.34,
        "longitude": 18.06,
        "generationtime_ms": 0.06,
        "utc_offset_seconds": 0,
        "timezone": "GMT",
        "elevation": 24.0,
        "current_units": {"temperature_2m": "°C", "wind_speed_10m": "m/s"},
        "current": {
            "time": "2024-01-29T12:00",
            "interval": 900,
            "temperature_2m": 3.2,
            "precipitation": 0.4,
            "weather_code": weather_code,
            "wind_speed_10m": 4.7,
        },
        "daily": {
            "time": ["2024-01-29", "2024-01-30", "2024-01-31"],
            "weather_code": [weather_code, 3, 71],
            "temperature_2m_max": [4.1, 2.0, -0.5],
            "temperature_2m_min": [-1.3, -2.8, -6.0],
        },
    }


def make_response(body: dict[str, Any] | bytes, status_code: int = 200) -> Mock:
    """Mock ``requests.Response`` carrying ``body``."""
    resp = Mock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return resp


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def ok_session(payload: dict[str, Any]) -> Mock:
    """Session whose ``get`` returns the sample payload."""
    session = Mock()
    session.get.return_value = make_response(payload)
    return session
