"""Pure rendering functions: DashboardView -> HTML or text.

All renderers follow the same pattern:
  - Input: ``DashboardView`` (or pieces of it), read-only
  - Output: str (HTML fragment, or plain text for the console)
  - No side effects, no I/O; unit conversion happens here, at draw time

Public API:
  - current: build_current_html
  - daily: build_daily_html
  - hourly: build_hourly_series, build_hourly_html
  - advice: build_advice_html
  - page: build_page_html (full document)
  - console: format_dashboard

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from weather_dashboard.renderers import render_template

       def build_mywidget_html(view: DashboardView) -> str:
           return render_template("mywidget.html.j2", ...)

2. Create the Jinja2 template in ``templates/{name}.html.j2``
   (fragment only; page chrome lives in ``base.html.j2``).
3. Call it from ``renderers/page.py`` and add tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
