"""Full dashboard page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.advice import build_advice_html
from weather_dashboard.renderers.current import build_current_html
from weather_dashboard.renderers.daily import build_daily_html
from weather_dashboard.renderers.hourly import build_hourly_html

if TYPE_CHECKING:
    from weather_dashboard.schemas import DashboardView


def build_page_html(view: DashboardView) -> str:
    """Assemble every card into a standalone HTML document."""
    fetched = view.snapshot.fetched_at_utc
    return render_template(
        "base.html.j2",
        place=view.label,
        unit=view.unit.suffix,
        updated=fetched.strftime("%Y-%m-%d %H:%M UTC"),
        current_html=build_current_html(view),
        hourly_html=build_hourly_html(view),
        daily_html=build_daily_html(view),
        advice_html=build_advice_html(view.advisories),
    )
