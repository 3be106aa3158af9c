"""Normalize raw Open-Meteo forecast payloads into typed snapshots.

All defaulting of optional provider fields happens here so the advisory
engine and renderers always see fully-populated structures.

Rules:
  - Temperatures are stored in Celsius exactly as received (no conversion).
  - Wind speeds are stored in km/h; ``m/s`` payloads are converted.
  - Provider order is preserved; nothing is reordered, resampled or truncated.
  - Any missing required field or mismatched sequence length raises
    ``MalformedResponse``.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import Any

from pydantic import ValidationError

from weather_dashboard.errors import MalformedResponse
from weather_dashboard.schemas import (
    CurrentConditions,
    DailySeries,
    HourlySeries,
    NormalizedSnapshot,
)
from weather_dashboard.units import ms_to_kmh

logger = logging.getLogger(__name__)

# Open-Meteo field name -> snapshot field name
CURRENT_REQUIRED = {
    "temperature_2m": "temperature_c",
    "apparent_temperature": "apparent_temperature_c",
    "relative_humidity_2m": "humidity_pct",
    "wind_speed_10m": "wind_speed_kmh",
    "weather_code": "weather_code",
    "is_day": "is_day",
}
CURRENT_DEFAULTS = {
    "precipitation": ("precipitation_mm", 0.0),
    "cloud_cover": ("cloud_cover_pct", 0.0),
}

HOURLY_REQUIRED = {"temperature_2m": "temperature_c"}
HOURLY_OPTIONAL = {
    "apparent_temperature": "apparent_temperature_c",
    "precipitation_probability": "precipitation_probability_pct",
    "precipitation": "precipitation_mm",
    "cloud_cover": "cloud_cover_pct",
    "wind_speed_10m": "wind_speed_kmh",
}

DAILY_REQUIRED = {
    "weather_code": "weather_code",
    "temperature_2m_max": "temp_max_c",
    "temperature_2m_min": "temp_min_c",
}
# Missing values (absent sequence or null entry) become 0
DAILY_ZERO_DEFAULT = {
    "precipitation_sum": "precip_sum_mm",
    "precipitation_probability_max": "precip_prob_max_pct",
    "wind_speed_10m_max": "wind_max_kmh",
    "uv_index_max": "uv_index_max",
}
DAILY_TIMES = {"sunrise": "sunrise", "sunset": "sunset"}

WIND_FIELDS = {"wind_speed_10m", "wind_speed_10m_max"}


def _block(raw: dict[str, Any], key: str) -> dict[str, Any]:
    block = raw.get(key)
    if not isinstance(block, dict):
        msg = f"Forecast response has no '{key}' block"
        raise MalformedResponse(msg)
    return block


def _sequence(block: dict[str, Any], key: str, section: str) -> list[Any]:
    values = block.get(key)
    if not isinstance(values, list):
        msg = f"{section} block is missing '{key}'"
        raise MalformedResponse(msg)
    return values


def _wind_to_kmh(value: float | None, unit: str | None) -> float | None:
    """Convert a wind reading to km/h according to the provider's declared unit."""
    if value is None or unit != "m/s":
        return value
    return float(ms_to_kmh(value))


def _check_lengths(section: str, columns: dict[str, list[Any]]) -> None:
    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        msg = f"{section} sequences differ in length ({detail})"
        raise MalformedResponse(msg)


def normalize_current(raw: dict[str, Any]) -> CurrentConditions:
    """Extract current conditions, applying defaults for optional fields."""
    block = _block(raw, "current")
    units = raw.get("current_units") or {}

    missing = [key for key in CURRENT_REQUIRED if block.get(key) is None]
    if missing:
        msg = f"current block is missing required fields: {', '.join(missing)}"
        raise MalformedResponse(msg)

    fields: dict[str, Any] = {name: block[key] for key, name in CURRENT_REQUIRED.items()}
    for key, (name, default) in CURRENT_DEFAULTS.items():
        value = block.get(key)
        fields[name] = default if value is None else value

    fields["wind_speed_kmh"] = _wind_to_kmh(block["wind_speed_10m"], units.get("wind_speed_10m"))
    fields["is_day"] = bool(block["is_day"])

    try:
        return CurrentConditions(**fields)
    except ValidationError as exc:
        msg = f"current block is invalid: {exc.error_count()} error(s)"
        raise MalformedResponse(msg) from exc


def normalize_hourly(raw: dict[str, Any]) -> HourlySeries:
    """Extract the hourly block, validating that all sequences line up."""
    block = _block(raw, "hourly")
    units = raw.get("hourly_units") or {}

    times = _sequence(block, "time", "hourly")
    columns: dict[str, list[Any]] = {"time": times}
    for key in HOURLY_REQUIRED:
        columns[key] = _sequence(block, key, "hourly")
    for key in HOURLY_OPTIONAL:
        values = block.get(key)
        if values is not None:
            columns[key] = list(values)
    _check_lengths("hourly", columns)

    fields: dict[str, Any] = {"time": [datetime.fromisoformat(t) for t in times]}
    for key, name in (HOURLY_REQUIRED | HOURLY_OPTIONAL).items():
        values = columns.get(key, [None] * len(times))
        if key in WIND_FIELDS:
            values = [_wind_to_kmh(v, units.get(key)) for v in values]
        fields[name] = values

    try:
        return HourlySeries(**fields)
    except ValidationError as exc:
        msg = f"hourly block is invalid: {exc.error_count()} error(s)"
        raise MalformedResponse(msg) from exc


def normalize_daily(raw: dict[str, Any]) -> DailySeries:
    """Extract the daily block. At least one day (today) must be present."""
    block = _block(raw, "daily")
    units = raw.get("daily_units") or {}

    dates = _sequence(block, "time", "daily")
    if not dates:
        msg = "daily block has no days"
        raise MalformedResponse(msg)

    columns: dict[str, list[Any]] = {"time": dates}
    for key in DAILY_REQUIRED:
        columns[key] = _sequence(block, key, "daily")
    for key in DAILY_ZERO_DEFAULT | DAILY_TIMES:
        values = block.get(key)
        if values is not None:
            columns[key] = list(values)
    _check_lengths("daily", columns)

    fields: dict[str, Any] = {"dates": [date.fromisoformat(d) for d in dates]}
    for key, name in DAILY_REQUIRED.items():
        fields[name] = columns[key]
    for key, name in DAILY_ZERO_DEFAULT.items():
        values = [0.0 if v is None else v for v in columns.get(key, [None] * len(dates))]
        if key in WIND_FIELDS:
            values = [_wind_to_kmh(v, units.get(key)) for v in values]
        fields[name] = values
    for key, name in DAILY_TIMES.items():
        fields[name] = [
            None if v is None else datetime.fromisoformat(v)
            for v in columns.get(key, [None] * len(dates))
        ]

    try:
        return DailySeries(**fields)
    except ValidationError as exc:
        msg = f"daily block is invalid: {exc.error_count()} error(s)"
        raise MalformedResponse(msg) from exc


def normalize(raw: dict[str, Any], *, fetched_at: datetime | None = None) -> NormalizedSnapshot:
    """
    Turn a raw Open-Meteo forecast response into a ``NormalizedSnapshot``.

    Args:
        raw: Decoded JSON with ``current``, ``hourly`` and ``daily`` blocks.
        fetched_at: Fetch timestamp (defaults to now, UTC).

    Raises:
        MalformedResponse: Required fields are missing, values are out of
            range, or parallel sequences differ in length.
    """
    if not isinstance(raw, dict):
        msg = "Forecast response is not an object"
        raise MalformedResponse(msg)

    try:
        snapshot = NormalizedSnapshot(
            current=normalize_current(raw),
            hourly=normalize_hourly(raw),
            daily=normalize_daily(raw),
            fetched_at_utc=fetched_at or datetime.now(UTC),
        )
    except (TypeError, ValueError) as exc:
        # Unparseable timestamps and similar
        msg = f"Forecast response could not be parsed: {exc}"
        raise MalformedResponse(msg) from exc

    logger.debug(
        "Normalized forecast: %d hourly entries, %d days", len(snapshot.hourly), len(snapshot.daily)
    )
    return snapshot
