"""WMO weather code classification.

Open-Meteo reports conditions as WMO weather interpretation codes
(https://open-meteo.com/en/docs). Each known code maps to a description and
two icon keys: a "big" artwork name and a "small" SF-Symbols-style name.
Related severities share icons but keep their own description.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from simple_weather.errors import UnknownCodeError


class WeatherCodeInfo(NamedTuple):
    """Display fields derived from a weather code."""

    description: str
    big_icon: str
    small_icon: str


class WeatherCode(IntEnum):
    """The closed set of WMO codes Open-Meteo emits."""

    CLEAR_SKY = 0
    MAINLY_CLEAR = 1
    PARTLY_CLOUDY = 2
    OVERCAST = 3
    FOG = 45
    DEPOSITING_RIME_FOG = 48
    DRIZZLE_LIGHT = 51
    DRIZZLE_MODERATE = 53
    DRIZZLE_DENSE = 55
    FREEZING_DRIZZLE_LIGHT = 56
    FREEZING_DRIZZLE_DENSE = 57
    RAIN_SLIGHT = 61
    RAIN_MODERATE = 63
    RAIN_HEAVY = 65
    FREEZING_RAIN_LIGHT = 66
    FREEZING_RAIN_HEAVY = 67
    SNOW_SLIGHT = 71
    SNOW_MODERATE = 73
    SNOW_HEAVY = 75
    SNOW_GRAINS = 77
    RAIN_SHOWERS_SLIGHT = 80
    RAIN_SHOWERS_MODERATE = 81
    RAIN_SHOWERS_VIOLENT = 82
    SNOW_SHOWERS_SLIGHT = 85
    SNOW_SHOWERS_HEAVY = 86
    THUNDERSTORM = 95
    THUNDERSTORM_SLIGHT_HAIL = 96
    THUNDERSTORM_HEAVY_HAIL = 99

    @property
    def info(self) -> WeatherCodeInfo:
        return WEATHER_CODES[self]

    @property
    def description(self) -> str:
        return WEATHER_CODES[self].description

    @property
    def big_icon(self) -> str:
        return WEATHER_CODES[self].big_icon

    @property
    def small_icon(self) -> str:
        return WEATHER_CODES[self].small_icon


# Icon groups: (big, small)
_SUNNY = ("sunny", "sun.max")
_SUNNY_CLOUD = ("sunnyCloud", "cloud.sun")
_CLOUDY = ("veryCloudy", "cloud")
_RAINY = ("rainy", "cloud.drizzle")
_SNOWING = ("snowing", "cloud.snow")
_SHOWERS = ("veryRainy", "cloud.rain")
_THUNDER = ("thunder", "cloud.bolt.rain")

_TABLE: list[tuple[WeatherCode, str, tuple[str, str]]] = [
    (WeatherCode.CLEAR_SKY, "Sunny", _SUNNY),
    (WeatherCode.MAINLY_CLEAR, "Mostly Clear", _SUNNY_CLOUD),
    (WeatherCode.PARTLY_CLOUDY, "Partly Cloudy", _SUNNY_CLOUD),
    (WeatherCode.OVERCAST, "Overcast", _CLOUDY),
    (WeatherCode.FOG, "Foggy", _CLOUDY),
    (WeatherCode.DEPOSITING_RIME_FOG, "Foggy", _CLOUDY),
    (WeatherCode.DRIZZLE_LIGHT, "Light Drizzle", _RAINY),
    (WeatherCode.DRIZZLE_MODERATE, "Moderate Drizzle", _RAINY),
    (WeatherCode.DRIZZLE_DENSE, "Dense Drizzle", _RAINY),
    (WeatherCode.FREEZING_DRIZZLE_LIGHT, "Freezing Drizzle", _RAINY),
    (WeatherCode.FREEZING_DRIZZLE_DENSE, "Freezing Drizzle", _RAINY),
    (WeatherCode.RAIN_SLIGHT, "Light Rain", _RAINY),
    (WeatherCode.RAIN_MODERATE, "Moderate Rain", _RAINY),
    (WeatherCode.RAIN_HEAVY, "Heavy Rain", _RAINY),
    (WeatherCode.FREEZING_RAIN_LIGHT, "Freezing Rain", _RAINY),
    (WeatherCode.FREEZING_RAIN_HEAVY, "Freezing Rain", _RAINY),
    (WeatherCode.SNOW_SLIGHT, "Light Snow", _SNOWING),
    (WeatherCode.SNOW_MODERATE, "Moderate Snow", _SNOWING),
    (WeatherCode.SNOW_HEAVY, "Heavy Snow", _SNOWING),
    (WeatherCode.SNOW_GRAINS, "Snow Grains", _SNOWING),
    (WeatherCode.RAIN_SHOWERS_SLIGHT, "Light Rain Showers", _SHOWERS),
    (WeatherCode.RAIN_SHOWERS_MODERATE, "Moderate Rain Showers", _SHOWERS),
    (WeatherCode.RAIN_SHOWERS_VIOLENT, "Violent Rain Showers", _SHOWERS),
    (WeatherCode.SNOW_SHOWERS_SLIGHT, "Snow Showers", _SNOWING),
    (WeatherCode.SNOW_SHOWERS_HEAVY, "Snow Showers", _SNOWING),
    (WeatherCode.THUNDERSTORM, "Thunderstorm", _THUNDER),
    (WeatherCode.THUNDERSTORM_SLIGHT_HAIL, "Thunderstorm with Hail", _THUNDER),
    (WeatherCode.THUNDERSTORM_HEAVY_HAIL, "Severe Thunderstorm with Heavy Hail", _THUNDER),
]

#: Static lookup, built once at import.
WEATHER_CODES: dict[WeatherCode, WeatherCodeInfo] = {
    code: WeatherCodeInfo(desc, big, small) for code, desc, (big, small) in _TABLE
}

# Generic icons for the presentation layer when a code is unknown
FALLBACK_BIG_ICON = "veryCloudy"
FALLBACK_SMALL_ICON = "questionmark"


def lookup(code: int) -> WeatherCode:
    """Return the ``WeatherCode`` member for ``code``.

    Raises:
        UnknownCodeError: If ``code`` isn't a known WMO code.
    """
    try:
        return WeatherCode(code)
    except ValueError:
        raise UnknownCodeError(code) from None


def classify(code: int) -> WeatherCodeInfo:
    """Map a WMO weather code to its description and icon keys."""
    return WEATHER_CODES[lookup(code)]


def small_icon_for(code: int) -> str:
    """Small icon for ``code``, or ``FALLBACK_SMALL_ICON`` if unknown."""
    try:
        return classify(code).small_icon
    except UnknownCodeError:
        return FALLBACK_SMALL_ICON


def big_icon_for(code: int) -> str:
    """Big icon for ``code``, or ``FALLBACK_BIG_ICON`` if unknown."""
    try:
        return classify(code).big_icon
    except UnknownCodeError:
        return FALLBACK_BIG_ICON
