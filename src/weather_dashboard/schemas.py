"""
Domain models for the weather dashboard.

Pydantic models define the canonical, typed shape of forecast data. The
normalizer turns raw Open-Meteo payloads into these; everything downstream
(advisories, renderers, session state) reads them and never the raw dicts.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Enums
# =============================================================================


class Unit(StrEnum):
    """Display unit for temperatures. Never affects stored values."""

    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def suffix(self) -> str:
        """Degree suffix, e.g. ``°C``."""
        return f"°{self.value}"


class Severity(StrEnum):
    """Advisory severity tier (display only)."""

    INFO = "info"
    CAUTION = "caution"
    DANGER = "danger"


# =============================================================================
# Location
# =============================================================================


class Coordinates(BaseModel):
    """Geographic point in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def fallback_label(self) -> str:
        """Label used when reverse geocoding finds no place name."""
        return f"Lat {self.lat:.2f}, Lon {self.lon:.2f}"


class ResolvedLocation(BaseModel):
    """A geocoded place: coordinates plus a display label."""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinates
    label: str


# =============================================================================
# Forecast
# =============================================================================


def _check_parallel(model: BaseModel, block: str) -> None:
    """Raise if the sequence fields of ``model`` differ in length."""
    lengths = {name: len(getattr(model, name)) for name in type(model).model_fields}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        msg = f"{block} sequences differ in length ({detail})"
        raise ValueError(msg)


class CurrentConditions(BaseModel):
    """Conditions at fetch time. Temperatures in Celsius, wind in km/h."""

    model_config = ConfigDict(frozen=True)

    temperature_c: float
    apparent_temperature_c: float
    humidity_pct: float = Field(..., ge=0, le=100)
    precipitation_mm: float = 0.0
    wind_speed_kmh: float
    cloud_cover_pct: float = Field(default=0.0, ge=0, le=100)
    weather_code: int
    is_day: bool


class HourlySeries(BaseModel):
    """Parallel hourly sequences; index i refers to the same timestamp everywhere."""

    model_config = ConfigDict(frozen=True)

    time: tuple[datetime, ...]
    temperature_c: tuple[float | None, ...]
    apparent_temperature_c: tuple[float | None, ...]
    precipitation_probability_pct: tuple[float | None, ...]
    precipitation_mm: tuple[float | None, ...]
    cloud_cover_pct: tuple[float | None, ...]
    wind_speed_kmh: tuple[float | None, ...]

    @model_validator(mode="after")
    def _same_length(self) -> HourlySeries:
        _check_parallel(self, "hourly")
        return self

    def __len__(self) -> int:
        return len(self.time)


class DailySeries(BaseModel):
    """Parallel daily sequences; index 0 is today, 1 tomorrow, and so on."""

    model_config = ConfigDict(frozen=True)

    dates: tuple[date, ...]
    weather_code: tuple[int, ...]
    temp_max_c: tuple[float, ...]
    temp_min_c: tuple[float, ...]
    precip_sum_mm: tuple[float, ...]
    precip_prob_max_pct: tuple[float, ...]
    wind_max_kmh: tuple[float, ...]
    sunrise: tuple[datetime | None, ...]
    sunset: tuple[datetime | None, ...]
    uv_index_max: tuple[float, ...]

    @model_validator(mode="after")
    def _same_length(self) -> DailySeries:
        _check_parallel(self, "daily")
        return self

    def __len__(self) -> int:
        return len(self.dates)


class NormalizedSnapshot(BaseModel):
    """One normalized forecast result for a single location and fetch time."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    hourly: HourlySeries
    daily: DailySeries
    fetched_at_utc: datetime


# =============================================================================
# Derived output
# =============================================================================


class AdvisoryItem(BaseModel):
    """One rule-derived recommendation."""

    model_config = ConfigDict(frozen=True)

    text: str
    severity: Severity


class Condition(BaseModel):
    """Human label and icon token for a weather code."""

    model_config = ConfigDict(frozen=True)

    text: str
    icon: str


class DashboardView(BaseModel):
    """Everything a renderer needs, read-only."""

    model_config = ConfigDict(frozen=True)

    label: str
    unit: Unit
    snapshot: NormalizedSnapshot
    advisories: tuple[AdvisoryItem, ...] = ()
