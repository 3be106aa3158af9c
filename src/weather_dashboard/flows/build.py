"""
Prefect flow for building a static dashboard page.

Resolves a location, fetches and normalizes its forecast, derives advisories
and writes ``site/index.html``.

Run locally:
    python -m weather_dashboard.flows.build

Run with Prefect dashboard:
    prefect server start &
    python -m weather_dashboard.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_dashboard.analysis.advisories import generate_advisories
from weather_dashboard.config import get_settings
from weather_dashboard.datasources.openmeteo import OpenMeteoProvider
from weather_dashboard.normalizer import normalize
from weather_dashboard.renderers.page import build_page_html
from weather_dashboard.schemas import (
    Coordinates,
    DashboardView,
    NormalizedSnapshot,
    ResolvedLocation,
    Unit,
)

provider = OpenMeteoProvider()
SITE_DIR = Path(get_settings().site_dir)


@task(name="resolve-location")
def resolve_location(
    query: str | None = None, lat: float | None = None, lon: float | None = None
) -> ResolvedLocation:
    """Geocode ``query``, or reverse-geocode ``lat``/``lon`` for a label."""
    if lat is not None and lon is not None:
        coords = Coordinates(lat=lat, lon=lon)
        return ResolvedLocation(coordinates=coords, label=provider.reverse_geocode(lat, lon))
    return provider.geocode(query or get_settings().default_location)


@task(name="fetch-forecast")
def fetch_forecast(location: ResolvedLocation) -> dict[str, Any]:
    """Fetch the raw Open-Meteo forecast for a resolved location."""
    coords = location.coordinates
    return provider.fetch_forecast(coords.lat, coords.lon)


@task(name="normalize-forecast")
def normalize_forecast(raw: dict[str, Any]) -> NormalizedSnapshot:
    """Normalize the raw payload (raises MalformedResponse on bad data)."""
    return normalize(raw)


@task(name="build-html")
def build_html(label: str, snapshot: NormalizedSnapshot, unit: Unit = Unit.CELSIUS) -> str:
    """Derive advisories and render the full page."""
    view = DashboardView(
        label=label,
        unit=unit,
        snapshot=snapshot,
        advisories=tuple(generate_advisories(snapshot)),
    )
    return build_page_html(view)


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to the site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-dashboard", log_prints=True)
def build_dashboard(
    query: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
    unit: Unit = Unit.CELSIUS,
) -> dict[str, Any]:
    """
    Build the static dashboard page for one location.

    Pass either a city ``query`` or ``lat``/``lon``; with neither, the
    configured default location is used.
    """
    location = resolve_location(query, lat, lon)
    print(f"Fetching forecast for {location.label}...")
    raw = fetch_forecast(location)
    snapshot = normalize_forecast(raw)

    print(f"Building page ({len(snapshot.daily)} days, {len(snapshot.hourly)} hours)...")
    html = build_html(location.label, snapshot, unit)
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {"location": location.label, "output": str(output_path)}


if __name__ == "__main__":
    result = build_dashboard()
    print(f"Flow complete: {result}")
