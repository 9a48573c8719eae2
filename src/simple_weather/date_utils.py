"""Date-formatting helpers for forecast rows."""

from __future__ import annotations

from datetime import datetime

from simple_weather.errors import ParseError

# Fixed English names so output doesn't depend on the process locale.
_WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_date(date_string: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` string (Gregorian calendar)."""
    try:
        return datetime.strptime(date_string, "%Y-%m-%d")
    except (TypeError, ValueError) as exc:
        msg = f"Expected a YYYY-MM-DD date, got {date_string!r}"
        raise ParseError(msg) from exc


def day_name(date_string: str) -> str:
    """Abbreviated weekday for an ISO date, e.g. ``"2024-01-29"`` -> ``"Mon"``.

    Raises:
        ParseError: If ``date_string`` isn't a valid ``YYYY-MM-DD`` date.
    """
    return _WEEKDAY_ABBR[parse_date(date_string).weekday()]
