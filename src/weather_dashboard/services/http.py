"""
HTTP session used for every Open-Meteo call.

All three endpoints (geocoding, reverse geocoding, forecast) share one
``DashboardSession``: it identifies the app in the User-Agent and applies
``http_timeout`` to any request made without an explicit timeout.

There are no retries. A manual search or locate reports the failure right
away, and a failed background refresh simply waits for the next interval.
"""

from __future__ import annotations

from typing import Any

import requests

DEFAULT_TIMEOUT = 30  # seconds
USER_AGENT = "weather-dashboard/0.1"


class DashboardSession(requests.Session):
    """``requests.Session`` with a per-session fallback timeout."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout
        self.headers["User-Agent"] = USER_AGENT

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        # Session.request forwards timeout=None when the caller gave none.
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(timeout: float = DEFAULT_TIMEOUT) -> DashboardSession:
    """Session for the Open-Meteo APIs, timing out after ``timeout`` seconds."""
    return DashboardSession(timeout)


session: DashboardSession = create_session()
