"""Open-Meteo API constants and the shared JSON fetch helper.

API docs:
  - Forecast: https://open-meteo.com/en/docs
  - Geocoding: https://open-meteo.com/en/docs/geocoding-api
"""

from __future__ import annotations

from typing import Any

import requests

from weather_dashboard.errors import MalformedResponse, NetworkFailure

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"
GEOCODING_SEARCH_API = "https://geocoding-api.open-meteo.com/v1/search"
GEOCODING_REVERSE_API = "https://geocoding-api.open-meteo.com/v1/reverse"

CURRENT_VARS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "wind_direction_10m",
    "cloud_cover",
]

HOURLY_VARS = [
    "temperature_2m",
    "apparent_temperature",
    "precipitation_probability",
    "precipitation",
    "cloud_cover",
    "wind_speed_10m",
]

DAILY_VARS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "sunrise",
    "sunset",
    "uv_index_max",
]


def get_json(http: requests.Session, url: str, params: dict[str, Any]) -> dict[str, Any]:
    """
    GET ``url`` and decode the JSON body.

    Raises:
        NetworkFailure: Transport error or non-success status.
        MalformedResponse: Body is not a JSON object.
    """
    try:
        resp = http.get(url, params=params)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        msg = f"Network error {exc.response.status_code if exc.response is not None else ''}"
        raise NetworkFailure(msg.strip()) from exc
    except requests.RequestException as exc:
        msg = f"Network error: {exc}"
        raise NetworkFailure(msg) from exc

    try:
        data = resp.json()
    except ValueError as exc:
        msg = f"Response from {url} is not valid JSON"
        raise MalformedResponse(msg) from exc
    if not isinstance(data, dict):
        msg = f"Response from {url} is not a JSON object"
        raise MalformedResponse(msg)
    return data
