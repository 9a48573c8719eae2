"""Error taxonomy for the weather pipeline.

Transport and decode failures propagate to whoever called the fetch. Store
failures are caught at the point of write by the forecast client.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for all simple-weather errors."""


class NetworkError(WeatherError):
    """The forecast request never produced a response (timeout, DNS, refused)."""


class DecodeError(WeatherError):
    """The response body is malformed or doesn't match the forecast model."""


class UnknownCodeError(WeatherError, ValueError):
    """A weather code outside the known WMO set."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown WMO weather code: {code}")
        self.code = code


class ParseError(WeatherError, ValueError):
    """A date string that isn't ``YYYY-MM-DD``."""


class StoreWriteError(WeatherError):
    """Writing to the shared snapshot store failed."""


class InvalidCoordinateError(WeatherError, ValueError):
    """Latitude or longitude out of range."""
