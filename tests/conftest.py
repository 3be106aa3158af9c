"""Shared fixtures: synthetic Open-Meteo payloads and a fake provider."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import pytest

from weather_dashboard.errors import NotFound
from weather_dashboard.normalizer import normalize
from weather_dashboard.schemas import Coordinates, NormalizedSnapshot, ResolvedLocation

MUMBAI = ResolvedLocation(
    coordinates=Coordinates(lat=19.07, lon=72.88),
    label="Mumbai, Maharashtra, India",
)


def _base_payload() -> dict[str, Any]:
    hours = range(24)
    return {
        "latitude": 19.07,
        "longitude": 72.88,
        "timezone": "Asia/Kolkata",
        "current_units": {"temperature_2m": "°C", "wind_speed_10m": "km/h"},
        "current": {
            "time": "2026-10-19T10:00",
            "temperature_2m": 28.4,
            "relative_humidity_2m": 70,
            "apparent_temperature": 31.2,
            "is_day": 1,
            "precipitation": 0.0,
            "weather_code": 2,
            "wind_speed_10m": 12.3,
            "wind_direction_10m": 240,
            "cloud_cover": 40,
        },
        "hourly_units": {"wind_speed_10m": "km/h"},
        "hourly": {
            "time": [f"2026-10-19T{h:02d}:00" for h in hours],
            "temperature_2m": [20 + h * 0.5 for h in hours],
            "apparent_temperature": [22 + h * 0.5 for h in hours],
            "precipitation_probability": [10] * 24,
            "precipitation": [0.0] * 24,
            "cloud_cover": [50] * 24,
            "wind_speed_10m": [10.0] * 24,
        },
        "daily_units": {"wind_speed_10m_max": "km/h"},
        "daily": {
            "time": ["2026-10-19", "2026-10-20"],
            "weather_code": [2, 3],
            "temperature_2m_max": [29.0, 30.0],
            "temperature_2m_min": [22.0, 23.0],
            "precipitation_sum": [0.0, 1.2],
            "precipitation_probability_max": [10, 20],
            "wind_speed_10m_max": [15.0, 18.0],
            "sunrise": ["2026-10-19T06:30", "2026-10-20T06:31"],
            "sunset": ["2026-10-19T18:10", "2026-10-20T18:09"],
            "uv_index_max": [5.0, 5.5],
        },
    }


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory: ``make_payload(daily={"temperature_2m_max": [35, 30]})``.

    Each keyword names a top-level block; its dict is merged into the
    default block.
    """

    def _make(**sections: dict[str, Any]) -> dict[str, Any]:
        payload = copy.deepcopy(_base_payload())
        for section, updates in sections.items():
            payload.setdefault(section, {}).update(updates)
        return payload

    return _make


@pytest.fixture
def make_snapshot(
    make_payload: Callable[..., dict[str, Any]],
) -> Callable[..., NormalizedSnapshot]:
    """Factory returning a normalized snapshot built from ``make_payload``."""

    def _make(**sections: dict[str, Any]) -> NormalizedSnapshot:
        return normalize(make_payload(**sections))

    return _make


class FakeProvider:
    """In-memory stand-in for OpenMeteoProvider."""

    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload
        self.places = {"mumbai": MUMBAI}
        self.forecast_error: Exception | None = None
        self.reverse_error: Exception | None = None
        self.calls: list[tuple[str, Any]] = []

    def geocode(self, query: str) -> ResolvedLocation:
        self.calls.append(("geocode", query))
        try:
            return self.places[query.lower()]
        except KeyError:
            msg = "City not found"
            raise NotFound(msg) from None

    def reverse_geocode(self, lat: float, lon: float) -> str:
        self.calls.append(("reverse_geocode", (lat, lon)))
        if self.reverse_error is not None:
            raise self.reverse_error
        for place in self.places.values():
            if (place.coordinates.lat, place.coordinates.lon) == (lat, lon):
                return place.label
        return Coordinates(lat=lat, lon=lon).fallback_label()

    def fetch_forecast(self, lat: float, lon: float) -> dict[str, Any]:
        self.calls.append(("fetch_forecast", (lat, lon)))
        if self.forecast_error is not None:
            raise self.forecast_error
        return self.payload


@pytest.fixture
def fake_provider(make_payload: Callable[..., dict[str, Any]]) -> FakeProvider:
    return FakeProvider(make_payload())
