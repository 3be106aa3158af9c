"""Current, hourly and daily forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_dashboard.datasources.openmeteo.client import (
    CURRENT_VARS,
    DAILY_VARS,
    HOURLY_VARS,
    OPEN_METEO_API,
    get_json,
)
from weather_dashboard.services.http import session

if TYPE_CHECKING:
    import requests


def fetch_forecast(
    lat: float,
    lon: float,
    *,
    http: requests.Session | None = None,
) -> dict[str, Any]:
    """
    Fetch the dashboard forecast for a location.

    Timestamps come back in the location's local time (``timezone=auto``),
    temperatures in Celsius and wind in km/h.

    Returns:
        Raw API response dict with ``current``, ``hourly`` and ``daily`` keys.
    """
    params: dict[str, str | float] = {
        "latitude": lat,
        "longitude": lon,
        "timezone": "auto",
        "current": ",".join(CURRENT_VARS),
        "hourly": ",".join(HOURLY_VARS),
        "daily": ",".join(DAILY_VARS),
    }
    return get_json(http or session, OPEN_METEO_API, params)
