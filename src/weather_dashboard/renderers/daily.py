"""Daily forecast cards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_dashboard.conditions import classify
from weather_dashboard.renderers import render_template
from weather_dashboard.units import format_temperature, round_half_up

if TYPE_CHECKING:
    from weather_dashboard.schemas import DashboardView


def daily_rows(view: DashboardView) -> list[dict[str, Any]]:
    """One display row per forecast day, in provider order."""
    daily = view.snapshot.daily
    rows = []
    for i, day in enumerate(daily.dates):
        condition = classify(daily.weather_code[i], True)
        rows.append(
            {
                "label": f"{day:%a} {day.day}",
                "icon": condition.icon,
                "text": condition.text,
                "tmax": format_temperature(daily.temp_max_c[i], view.unit),
                "tmin": format_temperature(daily.temp_min_c[i], view.unit),
                "rain": f"{round_half_up(daily.precip_prob_max_pct[i])}%",
                "wind": f"{round_half_up(daily.wind_max_kmh[i])} km/h",
            }
        )
    return rows


def build_daily_html(view: DashboardView) -> str:
    """Build HTML for the multi-day forecast strip."""
    return render_template("daily.html.j2", days=daily_rows(view))
