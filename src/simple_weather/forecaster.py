"""
Forecast client: fetch, persist and publish the latest snapshot.

One call to :meth:`ForecastClient.fetch_forecast` makes one request, decodes
the response, writes the snapshot to the shared store and hands it to every
subscriber, in that order. Failures before the snapshot exists propagate to
the caller and leave the previous snapshot in place. A failed store write is
logged and does not fail the fetch.

Usage::

    client = ForecastClient(SnapshotStore(Path("shared")))
    client.subscribe(lambda snap: print(snap.current.temperature_c))
    client.update_location(59.33, 18.07)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from simple_weather.datasources.weather import forecast as weather_forecast
from simple_weather.errors import DecodeError, NetworkError, StoreWriteError
from simple_weather.store import SNAPSHOT_KEY
from simple_weather.weather_codes import WeatherCode, lookup

if TYPE_CHECKING:
    import requests

    from simple_weather.schemas import ForecastSnapshot
    from simple_weather.store import SnapshotStore

logger = logging.getLogger(__name__)

Subscriber = Callable[["ForecastSnapshot"], None]


def current_weather_code(snapshot: ForecastSnapshot | None) -> WeatherCode | None:
    """Classified current weather code, or None when there is no snapshot.

    Raises:
        UnknownCodeError: If the snapshot carries a code outside the WMO set.
    """
    if snapshot is None:
        return None
    return lookup(snapshot.current.weather_code)


class ForecastClient:
    """Fetches forecasts and mirrors the latest one into a shared store."""

    def __init__(
        self,
        store: SnapshotStore | None = None,
        *,
        session: requests.Session | None = None,
        key: str = SNAPSHOT_KEY,
    ) -> None:
        self.store = store
        self.session = session
        self.key = key
        self._lock = threading.Lock()
        # Serializes store writes and subscriber delivery; re-entrant for
        # subscribers that trigger another fetch.
        self._publish_lock = threading.RLock()
        self._subscribers: list[Subscriber] = []
        self._snapshot: ForecastSnapshot | None = None
        # Sequence numbers: taken at call start, and of the last published result
        self._started = 0
        self._published = 0
        self._in_flight = 0

    @property
    def snapshot(self) -> ForecastSnapshot | None:
        """Latest published snapshot, None before the first success."""
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call ``callback`` with each new snapshot. Returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def fetch_forecast(self, lat: float, lon: float) -> ForecastSnapshot:
        """
        Fetch a snapshot for ``(lat, lon)``, store it and notify subscribers.

        Raises:
            InvalidCoordinateError: Coordinate out of range.
            NetworkError: Transport failure; nothing is stored.
            DecodeError: Undecodable response; nothing is stored.
        """
        with self._lock:
            self._started += 1
            seq = self._started
            self._in_flight += 1
        try:
            snapshot = weather_forecast.fetch_forecast(lat, lon, session=self.session)
        finally:
            with self._lock:
                self._in_flight -= 1

        self._publish(seq, snapshot)
        return snapshot

    def update_location(self, lat: float, lon: float) -> ForecastSnapshot | None:
        """Handle a location update. Returns None if the fetch failed."""
        try:
            return self.fetch_forecast(lat, lon)
        except (NetworkError, DecodeError) as exc:
            logger.error("Error fetching weather data for (%s, %s): %s", lat, lon, exc)
            return None

    def current_weather_code(self) -> WeatherCode | None:
        return current_weather_code(self._snapshot)

    def _is_current(self, seq: int) -> bool:
        with self._lock:
            return seq == self._published

    def _publish(self, seq: int, snapshot: ForecastSnapshot) -> None:
        with self._lock:
            if seq < self._published:
                # A call started later has already published; don't clobber it.
                logger.info("Discarding stale forecast (call %d, latest %d)", seq, self._published)
                return
            self._published = seq
            self._snapshot = snapshot

        with self._publish_lock:
            if not self._is_current(seq):
                logger.info("Forecast from call %d superseded before sharing", seq)
                return
            self._save(snapshot)
            with self._lock:
                subscribers = list(self._subscribers)

            for callback in subscribers:
                if not self._is_current(seq):
                    logger.info("Forecast from call %d superseded during delivery", seq)
                    return
                try:
                    callback(snapshot)
                except Exception:
                    logger.exception("Forecast subscriber %r failed", callback)

    def _save(self, snapshot: ForecastSnapshot) -> None:
        if self.store is None:
            return
        try:
            path = self.store.put(self.key, snapshot.to_json())
        except StoreWriteError as exc:
            logger.warning("Could not share forecast snapshot: %s", exc)
        else:
            logger.debug("Shared forecast snapshot at %s", path)
