"""Widget-side reader for the shared snapshot.

The widget runs in its own process and never fetches. Its scheduler calls
:func:`timeline_entry` periodically; everything here is read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from simple_weather.datasources.weather.forecast import decode_forecast
from simple_weather.errors import DecodeError
from simple_weather.store import SNAPSHOT_KEY

if TYPE_CHECKING:
    from simple_weather.schemas import ForecastSnapshot
    from simple_weather.store import SnapshotStore

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Loading..."
MISSING_TEXT = "N/A"

#: How long the widget's scheduler should wait before asking again.
REFRESH_INTERVAL = timedelta(hours=1)


@dataclass(frozen=True)
class WidgetEntry:
    """What the widget shows at one point on its timeline."""

    temperature: str
    date: datetime = field(default_factory=datetime.now)

    @property
    def next_refresh(self) -> datetime:
        return self.date + REFRESH_INTERVAL


def read_latest_snapshot(store: SnapshotStore, key: str = SNAPSHOT_KEY) -> ForecastSnapshot | None:
    """Latest shared snapshot, or None if nothing usable has been written."""
    try:
        raw = store.get(key)
    except OSError as exc:
        logger.warning("Could not read shared snapshot: %s", exc)
        return None
    if raw is None:
        return None
    try:
        return decode_forecast(raw)
    except DecodeError as exc:
        logger.warning("Ignoring unreadable shared snapshot: %s", exc)
        return None


def current_temperature_label(store: SnapshotStore) -> str:
    """Current temperature as ``"21.4°"``, or ``"N/A"`` without a snapshot."""
    snapshot = read_latest_snapshot(store)
    if snapshot is None:
        return MISSING_TEXT
    return f"{snapshot.current.temperature_c}°"


def placeholder_entry() -> WidgetEntry:
    return WidgetEntry(temperature=PLACEHOLDER_TEXT)


def timeline_entry(store: SnapshotStore, now: datetime | None = None) -> WidgetEntry:
    """Build the entry for the widget's next timeline refresh."""
    return WidgetEntry(
        temperature=current_temperature_label(store),
        date=now or datetime.now(),
    )
