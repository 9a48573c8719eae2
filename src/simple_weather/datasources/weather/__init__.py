"""Open-Meteo weather data source.

Public API:
  - forecast: fetch_forecast (current conditions + daily forecast), decode_forecast
  - client: API URL, requested variables, build_forecast_url
"""

from simple_weather.datasources.weather.client import OPEN_METEO_API, build_forecast_url
from simple_weather.datasources.weather.forecast import decode_forecast, fetch_forecast

__all__ = [
    "OPEN_METEO_API",
    "build_forecast_url",
    "decode_forecast",
    "fetch_forecast",
]
