"""Tests for the forecast snapshot models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from simple_weather.schemas import (
    Coordinate,
    CurrentConditions,
    DailyForecast,
    DayForecast,
    ForecastSnapshot,
)


class TestForecastSnapshot:
    """Test decoding and serializing snapshots."""

    def test_from_wire_names(self, payload: dict[str, Any]) -> None:
        snap = ForecastSnapshot.model_validate(payload)
        assert snap.latitude == 59.34
        assert snap.longitude == 18.06
        assert snap.current.temperature_c == 3.2
        assert snap.current.weather_code == 61
        assert snap.current.wind_speed_ms == 4.7
        assert snap.current.precipitation == 0.4
        assert snap.daily.dates == ("2024-01-29", "2024-01-30", "2024-01-31")
        assert snap.daily.max_temps == (4.1, 2.0, -0.5)

    def test_from_field_names(self) -> None:
        snap = ForecastSnapshot(
            longitude=1.0,
            latitude=2.0,
            current=CurrentConditions(
                temperature_c=10.0, weather_code=0, wind_speed_ms=1.5, precipitation=0.0
            ),
            daily=DailyForecast(
                max_temps=[1.0], min_temps=[0.0], weather_codes=[0], dates=["2024-01-29"]
            ),
        )
        assert snap.daily.weather_codes == (0,)

    def test_json_round_trip(self, payload: dict[str, Any]) -> None:
        snap = ForecastSnapshot.model_validate(payload)
        restored = ForecastSnapshot.model_validate_json(snap.to_json())
        assert restored == snap

    def test_serializes_wire_names(self, payload: dict[str, Any]) -> None:
        dumped = ForecastSnapshot.model_validate(payload).model_dump(by_alias=True)
        assert set(dumped["current"]) == {
            "temperature_2m",
            "weather_code",
            "wind_speed_10m",
            "precipitation",
        }
        assert set(dumped["daily"]) == {
            "temperature_2m_max",
            "temperature_2m_min",
            "weather_code",
            "time",
        }

    def test_frozen(self, payload: dict[str, Any]) -> None:
        snap = ForecastSnapshot.model_validate(payload)
        with pytest.raises(ValidationError):
            snap.latitude = 0.0  # type: ignore[misc]


class TestDailyForecast:
    """Test the parallel-array invariant and day helpers."""

    def test_mismatched_lengths_rejected(self) -> None:
        with pytest.raises(ValidationError, match="mismatched lengths"):
            DailyForecast(
                max_temps=[1.0, 2.0],
                min_temps=[0.0, 1.0],
                weather_codes=[0],
                dates=["2024-01-29", "2024-01-30"],
            )

    def test_days(self, payload: dict[str, Any]) -> None:
        daily = DailyForecast.model_validate(payload["daily"])
        assert len(daily) == 3
        assert daily.days()[0] == DayForecast("2024-01-29", 4.1, -1.3, 61)

    def test_forecast_days_skip_today(self, payload: dict[str, Any]) -> None:
        daily = DailyForecast.model_validate(payload["daily"])
        upcoming = daily.forecast_days()
        assert [d.date for d in upcoming] == ["2024-01-30", "2024-01-31"]
        assert upcoming[1].weather_code == 71

    def test_weather_code_must_be_int(self, payload: dict[str, Any]) -> None:
        payload["daily"]["weather_code"] = [61, "3", 71]
        with pytest.raises(ValidationError):
            DailyForecast.model_validate(payload["daily"])


class TestCoordinate:
    """Test coordinate bounds."""

    @pytest.mark.parametrize(("lat", "lon"), [(0, 0), (90, 180), (-90, -180), (59.33, 18.07)])
    def test_valid(self, lat: float, lon: float) -> None:
        Coordinate(lat=lat, lon=lon)

    @pytest.mark.parametrize(
        ("lat", "lon"), [(90.1, 0), (-91, 0), (0, 180.5), (0, -181), (float("nan"), 0)]
    )
    def test_invalid(self, lat: float, lon: float) -> None:
        with pytest.raises(ValidationError):
            Coordinate(lat=lat, lon=lon)
