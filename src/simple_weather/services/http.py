"""
Shared HTTP session for Open-Meteo requests.

Forecast fetches are single best-effort requests: the mounted adapter never
retries, so a timeout or refused connection reaches the caller on the first
attempt. Every request gets ``DEFAULT_TIMEOUT`` unless the caller passes one.

Usage::

    from simple_weather.services.http import session

    resp = session.get(build_forecast_url(59.33, 18.07))
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: One attempt only. Connection, read and status errors are not retried.
NO_RETRY = Retry(total=0, connect=0, read=0, status=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "simple-weather/0.1"


class ForecastSession(requests.Session):
    """``requests.Session`` that fills in a timeout when the caller leaves it unset."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        # Session.request passes timeout=None explicitly, so setdefault isn't enough
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(timeout: float = DEFAULT_TIMEOUT) -> ForecastSession:
    """Build a single-attempt session with ``timeout`` applied to every request."""
    s = ForecastSession(timeout)
    adapter = HTTPAdapter(max_retries=NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, import and use directly.
session: ForecastSession = create_session()
