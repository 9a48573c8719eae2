"""Open-Meteo API client constants and URL construction.

API docs: https://open-meteo.com/en/docs
"""

from __future__ import annotations

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Current-conditions variables we request
CURRENT_VARS = [
    "temperature_2m",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
]

# Daily variables we request
DAILY_VARS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
]

WIND_SPEED_UNIT = "ms"


def build_forecast_url(lat: float, lon: float) -> str:
    """
    Build the forecast request URL.

    The query string is assembled by hand: Open-Meteo expects comma-separated
    variable lists, which ``requests`` would percent-encode if passed as params.

    Args:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees.
    """
    return (
        f"{OPEN_METEO_API}?latitude={lat}&longitude={lon}"
        f"&current={','.join(CURRENT_VARS)}"
        f"&daily={','.join(DAILY_VARS)}"
        f"&wind_speed_unit={WIND_SPEED_UNIT}"
    )
