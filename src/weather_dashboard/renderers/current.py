"""Current conditions card."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from weather_dashboard.conditions import classify
from weather_dashboard.renderers import render_template
from weather_dashboard.units import format_temperature, round_half_up

if TYPE_CHECKING:
    from weather_dashboard.schemas import DashboardView


def _clock(value: datetime | None) -> str:
    return value.strftime("%H:%M") if value else "—"


def current_context(view: DashboardView) -> dict[str, Any]:
    """Display strings for the current card (shared with the console renderer)."""
    current = view.snapshot.current
    daily = view.snapshot.daily
    condition = classify(current.weather_code, current.is_day)
    return {
        "place": view.label,
        "temp": format_temperature(current.temperature_c, view.unit),
        "condition": condition.text,
        "icon": condition.icon,
        "feels": format_temperature(current.apparent_temperature_c, view.unit),
        "humidity": f"{round_half_up(current.humidity_pct)}%",
        "wind": f"{round_half_up(current.wind_speed_kmh)} km/h",
        "precip": f"{current.precipitation_mm:g} mm",
        "cloud": f"{round_half_up(current.cloud_cover_pct)}%",
        "tmin": f"Min {format_temperature(daily.temp_min_c[0], view.unit)}",
        "tmax": f"Max {format_temperature(daily.temp_max_c[0], view.unit)}",
        "sunrise": _clock(daily.sunrise[0]),
        "sunset": _clock(daily.sunset[0]),
    }


def build_current_html(view: DashboardView) -> str:
    """Build HTML for the current-conditions card."""
    return render_template("current.html.j2", **current_context(view))
