"""Plain-text dashboard for the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.renderers.current import current_context
from weather_dashboard.renderers.daily import daily_rows
from weather_dashboard.renderers.hourly import hourly_chips

if TYPE_CHECKING:
    from weather_dashboard.schemas import DashboardView

SEVERITY_MARKS = {"info": "·", "caution": "!", "danger": "!!"}


def format_dashboard(view: DashboardView, *, hours: int = 12) -> str:
    """Render the view as text, one section per card."""
    cur = current_context(view)
    lines = [
        cur["place"],
        f"{cur['icon']}  {cur['temp']}  {cur['condition']}  ({cur['tmin']} / {cur['tmax']})",
        (
            f"Feels {cur['feels']} · Humidity {cur['humidity']} · Wind {cur['wind']} · "
            f"Precip {cur['precip']} · Cloud {cur['cloud']}"
        ),
        f"Sunrise {cur['sunrise']} · Sunset {cur['sunset']}",
        "",
        "Next hours:",
    ]
    lines.extend(f"  {chip}" for chip in hourly_chips(view)[:hours])

    lines += ["", "Daily:"]
    lines.extend(
        f"  {d['label']:<7} {d['icon']} {d['tmax']:>5} / {d['tmin']:<5} {d['text']}"
        f" · Rain {d['rain']} · Wind {d['wind']}"
        for d in daily_rows(view)
    )

    if view.advisories:
        lines += ["", "Advice:"]
        lines.extend(
            f"  {SEVERITY_MARKS[item.severity.value]} {item.text}" for item in view.advisories
        )
    return "\n".join(lines)
