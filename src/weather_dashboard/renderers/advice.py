"""Advisory list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_dashboard.schemas import AdvisoryItem


def build_advice_html(items: Sequence[AdvisoryItem]) -> str:
    """Build the advisory ``<ul>``; one ``<li>`` per item, classed by severity."""
    if not items:
        return "<p>No advisories for today.</p>"
    return render_template("advice.html.j2", items=items)
