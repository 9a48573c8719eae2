"""Simple Weather - current conditions and daily forecasts from Open-Meteo.

Architecture::

    datasources/     Open-Meteo forecast URL, fetch and decode
    schemas.py       Pydantic models for the forecast snapshot
    weather_codes.py WMO code -> description + icon keys
    forecaster.py    ForecastClient (fetch, share, notify subscribers)
    store.py         Shared snapshot store read by the widget
    widget.py        Widget-side reader (latest snapshot, temperature label)
    flows/           Prefect flow for scheduled refreshes
    services/        Shared HTTP session

Data flow: location update -> forecaster -> Open-Meteo -> snapshot ->
store + subscribers; widget reads the store on its own schedule.
"""

__version__ = "0.1.0"

from simple_weather.config import Settings
from simple_weather.forecaster import ForecastClient
from simple_weather.schemas import ForecastSnapshot

__all__ = ["ForecastClient", "ForecastSnapshot", "Settings", "__version__"]
