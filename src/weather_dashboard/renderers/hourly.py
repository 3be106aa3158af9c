"""Hourly chips and chart data for the next 24 hours."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_dashboard.renderers import render_template
from weather_dashboard.units import display_temperature, format_temperature

if TYPE_CHECKING:
    from weather_dashboard.schemas import DashboardView, NormalizedSnapshot, Unit

HOURS_SHOWN = 24


def build_hourly_series(snapshot: NormalizedSnapshot, unit: Unit) -> dict[str, Any]:
    """
    Chart series for the first 24 hourly entries.

    Temperatures are converted to ``unit`` here, into new lists; the
    snapshot keeps its Celsius values.

    Returns:
        Dict with ``labels``, ``temperature``, ``feels_like`` and
        ``rain_pct`` lists of equal length (missing values stay None).
    """
    hourly = snapshot.hourly
    n = min(HOURS_SHOWN, len(hourly))

    def convert(values: tuple[float | None, ...]) -> list[float | None]:
        return [None if v is None else display_temperature(v, unit) for v in values[:n]]

    return {
        "unit": unit.suffix,
        "labels": [t.strftime("%H:00") for t in hourly.time[:n]],
        "temperature": convert(hourly.temperature_c),
        "feels_like": convert(hourly.apparent_temperature_c),
        "rain_pct": list(hourly.precipitation_probability_pct[:n]),
    }


def hourly_chips(view: DashboardView) -> list[str]:
    """Quick-glance strings like ``"09:00 · 27°C · 20%"``."""
    hourly = view.snapshot.hourly
    chips = []
    for i in range(min(HOURS_SHOWN, len(hourly))):
        temp = hourly.temperature_c[i]
        pop = hourly.precipitation_probability_pct[i]
        temp_str = "—" if temp is None else format_temperature(temp, view.unit)
        chips.append(f"{hourly.time[i]:%H:00} · {temp_str} · {pop or 0:g}%")
    return chips


def build_hourly_html(view: DashboardView) -> str:
    """Build HTML for hourly chips plus the embedded chart series."""
    return render_template(
        "hourly.html.j2",
        chips=hourly_chips(view),
        series=build_hourly_series(view.snapshot, view.unit),
    )
