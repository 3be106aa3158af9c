"""Open-Meteo data source (free, no API key).

Public API:
  - geocoding: geocode_city, reverse_geocode
  - forecast: fetch_forecast (current + hourly + daily)
  - client: API URLs and requested variables
  - OpenMeteoProvider: the three calls bundled behind one object
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_dashboard.datasources.openmeteo.client import (
    GEOCODING_REVERSE_API,
    GEOCODING_SEARCH_API,
    OPEN_METEO_API,
)
from weather_dashboard.datasources.openmeteo.forecast import fetch_forecast
from weather_dashboard.datasources.openmeteo.geocoding import geocode_city, reverse_geocode
from weather_dashboard.services.http import session

if TYPE_CHECKING:
    import requests

    from weather_dashboard.schemas import ResolvedLocation

__all__ = [
    "GEOCODING_REVERSE_API",
    "GEOCODING_SEARCH_API",
    "OPEN_METEO_API",
    "OpenMeteoProvider",
    "fetch_forecast",
    "geocode_city",
    "reverse_geocode",
]


class OpenMeteoProvider:
    """Geocoding + forecast calls sharing one HTTP session."""

    def __init__(self, http: requests.Session | None = None) -> None:
        self.http = http or session

    def geocode(self, query: str) -> ResolvedLocation:
        return geocode_city(query, http=self.http)

    def reverse_geocode(self, lat: float, lon: float) -> str:
        return reverse_geocode(lat, lon, http=self.http)

    def fetch_forecast(self, lat: float, lon: float) -> dict[str, Any]:
        return fetch_forecast(lat, lon, http=self.http)
