"""City search and reverse geocoding via the Open-Meteo Geocoding API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_dashboard.datasources.openmeteo.client import (
    GEOCODING_REVERSE_API,
    GEOCODING_SEARCH_API,
    get_json,
)
from weather_dashboard.errors import MalformedResponse, NotFound
from weather_dashboard.schemas import Coordinates, ResolvedLocation
from weather_dashboard.services.http import session

if TYPE_CHECKING:
    import requests


def place_label(result: dict[str, Any]) -> str:
    """Build ``"Name, Admin1, Country"`` from a geocoding result (admin1 optional)."""
    parts = [result.get("name", ""), result.get("admin1"), result.get("country", "")]
    return ", ".join(p for p in parts if p)


def geocode_city(name: str, *, http: requests.Session | None = None) -> ResolvedLocation:
    """
    Resolve a city name to coordinates and a display label.

    Args:
        name: Free-text city query, e.g. ``"Mumbai"``.

    Raises:
        NotFound: The query matched nothing.
    """
    params: dict[str, str | int] = {
        "name": name,
        "count": 1,
        "language": "en",
        "format": "json",
    }
    data = get_json(http or session, GEOCODING_SEARCH_API, params)

    results = data.get("results") or []
    if not results:
        msg = "City not found"
        raise NotFound(msg)

    best = results[0]
    if best.get("latitude") is None or best.get("longitude") is None:
        msg = f"Geocoding result for '{name}' has no coordinates"
        raise MalformedResponse(msg)
    return ResolvedLocation(
        coordinates=Coordinates(lat=best["latitude"], lon=best["longitude"]),
        label=place_label(best),
    )


def reverse_geocode(lat: float, lon: float, *, http: requests.Session | None = None) -> str:
    """
    Look up a display label for a coordinate pair.

    Falls back to ``"Lat x.xx, Lon y.yy"`` when no place is known there.
    """
    params: dict[str, str | float] = {
        "latitude": lat,
        "longitude": lon,
        "language": "en",
        "format": "json",
    }
    data = get_json(http or session, GEOCODING_REVERSE_API, params)

    results = data.get("results") or []
    if results:
        return place_label(results[0])
    return Coordinates(lat=lat, lon=lon).fallback_label()
