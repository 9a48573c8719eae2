"""
Domain models for simple-weather.

Pydantic models for the Open-Meteo forecast response. Field aliases are the
wire names, so a snapshot dumped with ``by_alias=True`` has the same shape as
the API response it was decoded from.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """Geographic point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


# =============================================================================
# Weather
# =============================================================================


class CurrentConditions(BaseModel):
    """Conditions at fetch time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature_c: float = Field(..., alias="temperature_2m")
    weather_code: StrictInt = Field(..., alias="weather_code")
    wind_speed_ms: float = Field(..., alias="wind_speed_10m")
    precipitation: float = Field(..., alias="precipitation")


@dataclass(frozen=True)
class DayForecast:
    """One row of the daily forecast."""

    date: str
    max_temp: float
    min_temp: float
    weather_code: int


class DailyForecast(BaseModel):
    """Multi-day forecast as parallel arrays, index 0 being today."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_temps: tuple[float, ...] = Field(..., alias="temperature_2m_max")
    min_temps: tuple[float, ...] = Field(..., alias="temperature_2m_min")
    weather_codes: tuple[StrictInt, ...] = Field(..., alias="weather_code")
    dates: tuple[str, ...] = Field(..., alias="time")

    @model_validator(mode="after")
    def _check_lengths(self) -> DailyForecast:
        lengths = {
            "time": len(self.dates),
            "weather_code": len(self.weather_codes),
            "temperature_2m_max": len(self.max_temps),
            "temperature_2m_min": len(self.min_temps),
        }
        if len(set(lengths.values())) > 1:
            msg = f"Daily arrays have mismatched lengths: {lengths}"
            raise ValueError(msg)
        return self

    def __len__(self) -> int:
        return len(self.dates)

    def days(self) -> list[DayForecast]:
        """All days, today first."""
        return [
            DayForecast(date=d, max_temp=hi, min_temp=lo, weather_code=code)
            for d, hi, lo, code in zip(
                self.dates, self.max_temps, self.min_temps, self.weather_codes, strict=True
            )
        ]

    def forecast_days(self) -> list[DayForecast]:
        """Forward-looking days (everything after today)."""
        return self.days()[1:]


class ForecastSnapshot(BaseModel):
    """One complete reading for a coordinate. Replaced wholesale, never patched."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    longitude: float
    latitude: float
    current: CurrentConditions
    daily: DailyForecast

    def to_json(self) -> bytes:
        """Serialize using the wire field names."""
        return self.model_dump_json(by_alias=True).encode()
