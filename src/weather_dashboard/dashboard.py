"""
Dashboard controller.

Wires the data source, normalizer, session state, advisory engine and a
render callback together. UI callers (CLI, a web front end, tests) invoke:

  - ``search(query)``      manual city search, failures shown as notices
  - ``locate()``           geolocation, failures shown as notices
  - ``set_unit(unit)``     display unit toggle, no refetch
  - ``refresh()``          silent background refetch for the current location
  - ``boot()``             geolocate, else fall back to the default location
  - ``start()`` / ``stop()``  clock and refresh background tasks

Blocking HTTP calls run in worker threads; reverse geocoding and the
forecast fetch are awaited together.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from weather_dashboard.analysis.advisories import generate_advisories
from weather_dashboard.config import Settings, get_settings
from weather_dashboard.datasources.openmeteo import OpenMeteoProvider
from weather_dashboard.errors import PermissionDenied, WeatherError
from weather_dashboard.normalizer import normalize
from weather_dashboard.schemas import Coordinates, DashboardView, Unit
from weather_dashboard.services.http import create_session
from weather_dashboard.state import SessionState

logger = logging.getLogger(__name__)

GEOLOCATION_TIMEOUT = 8  # seconds, boot only


class StaticGeolocator:
    """Geolocation backed by a fixed position (e.g. from settings).

    Without a position it behaves like a platform with geolocation
    unsupported and raises ``PermissionDenied``.
    """

    def __init__(self, coordinates: Coordinates | None = None) -> None:
        self.coordinates = coordinates

    @classmethod
    def from_settings(cls, settings: Settings) -> StaticGeolocator:
        if settings.home_lat is None or settings.home_lon is None:
            return cls()
        return cls(Coordinates(lat=settings.home_lat, lon=settings.home_lon))

    async def locate(self) -> Coordinates:
        if self.coordinates is None:
            msg = "Geolocation not supported"
            raise PermissionDenied(msg)
        return self.coordinates


class Dashboard:
    """One dashboard session: state plus the operations that mutate it."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        provider: OpenMeteoProvider | None = None,
        geolocator: StaticGeolocator | None = None,
        notify: Callable[[str], None] | None = None,
        render: Callable[[DashboardView], None] | None = None,
        on_clock: Callable[[datetime], None] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.provider = provider or OpenMeteoProvider(create_session(self.settings.http_timeout))
        self.geolocator = geolocator or StaticGeolocator.from_settings(self.settings)
        self.notify = notify or logger.info
        self.render_callback = render
        self.on_clock = on_clock
        self.state = SessionState(self.settings.unit)
        self.running = False
        self._tasks: list[asyncio.Task[None]] = []

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def view(self) -> DashboardView | None:
        """Build a fresh view from the stored snapshot, or None before the first fetch."""
        snapshot = self.state.snapshot
        if snapshot is None:
            return None
        return DashboardView(
            label=self.state.label,
            unit=self.state.unit,
            snapshot=snapshot,
            advisories=tuple(generate_advisories(snapshot)),
        )

    def render(self) -> DashboardView | None:
        view = self.view()
        if view is not None and self.render_callback is not None:
            self.render_callback(view)
        return view

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    async def resolve_and_render(self, target: Coordinates | str) -> DashboardView | None:
        """
        Resolve a location, fetch and normalize its forecast, then render.

        Args:
            target: Coordinates, or a city name to geocode first.

        Returns:
            The rendered view, or None if a newer request already replaced
            the state while this one was in flight.

        Raises:
            WeatherError: Any lookup or normalization failure. State is left
                untouched.
        """
        request_id = self.state.begin_request()

        if isinstance(target, str):
            location = await asyncio.to_thread(self.provider.geocode, target)
            coords = location.coordinates
        else:
            coords = target

        label, raw = await asyncio.gather(
            asyncio.to_thread(self.provider.reverse_geocode, coords.lat, coords.lon),
            asyncio.to_thread(self.provider.fetch_forecast, coords.lat, coords.lon),
        )
        snapshot = normalize(raw)

        if not self.state.set_location(coords, label, snapshot, request_id=request_id):
            return None
        logger.info("Loaded forecast for %s (%.2f, %.2f)", label, coords.lat, coords.lon)
        return self.render()

    # -------------------------------------------------------------------------
    # User actions
    # -------------------------------------------------------------------------

    async def search(self, query: str) -> bool:
        """Search a city by name. Returns True if the dashboard was updated."""
        query = query.strip()
        if not query:
            self.notify("Type a city name")
            return False
        try:
            await self.resolve_and_render(query)
        except WeatherError as exc:
            logger.info("Search for %r failed: %s", query, exc)
            self.notify(str(exc) or "Search failed")
            return False
        return True

    async def locate(self) -> bool:
        """Use the device position. Returns True if the dashboard was updated."""
        try:
            coords = await self.geolocator.locate()
        except PermissionDenied as exc:
            logger.info("Geolocation refused: %s", exc)
            self.notify("Location permission denied")
            return False
        try:
            await self.resolve_and_render(coords)
        except WeatherError as exc:
            logger.info("Fetch for current location failed: %s", exc)
            self.notify("Could not fetch weather for your location")
            return False
        return True

    def set_unit(self, unit: Unit) -> DashboardView | None:
        """Switch display unit and re-render from the stored snapshot."""
        self.state.set_unit(unit)
        return self.render()

    async def refresh(self) -> bool:
        """
        Refetch the forecast for the current location.

        Never raises: failures are logged and the previous snapshot stays.
        Discarded if any search/locate lands while the refetch is in flight.
        """
        coords = self.state.coordinates
        if coords is None:
            return False
        label = self.state.label
        applied = self.state.applied_request
        try:
            raw = await asyncio.to_thread(self.provider.fetch_forecast, coords.lat, coords.lon)
            snapshot = normalize(raw)
        except Exception as exc:
            logger.warning("Background refresh for %s failed: %s", label, exc)
            return False

        if not self.state.set_location(coords, label, snapshot, refresh_of=applied):
            return False
        self.render()
        self.notify("Weather updated")
        return True

    async def boot(self) -> DashboardView | None:
        """Start-up: try geolocation, fall back to the default location."""
        try:
            coords = await asyncio.wait_for(self.geolocator.locate(), GEOLOCATION_TIMEOUT)
            return await self.resolve_and_render(coords)
        except (WeatherError, TimeoutError) as exc:
            default = self.settings.default_location
            logger.info("Geolocation unavailable (%s); using %s", exc, default)
            view = await self.resolve_and_render(default)
            self.notify(f"Using {default} as default. Use your location to switch.")
            return view

    # -------------------------------------------------------------------------
    # Background tasks
    # -------------------------------------------------------------------------

    async def _clock_loop(self) -> None:
        while self.running:
            if self.on_clock is not None:
                self.on_clock(datetime.now())
            await asyncio.sleep(self.settings.clock_interval_seconds)

    async def _refresh_loop(self) -> None:
        while self.running:
            await asyncio.sleep(self.settings.refresh_interval_minutes * 60)
            if self.running:
                await self.refresh()

    def start(self) -> None:
        """Schedule the clock and refresh tasks on the running loop."""
        if self.running:
            return
        self.running = True
        logger.info(
            "Starting background tasks (refresh every %s min)",
            self.settings.refresh_interval_minutes,
        )
        self._tasks = [
            asyncio.create_task(self._clock_loop()),
            asyncio.create_task(self._refresh_loop()),
        ]

    async def wait(self) -> None:
        """Block until the background tasks end (normally only on ``stop``)."""
        await asyncio.gather(*self._tasks)

    async def stop(self) -> None:
        """Cancel the background tasks and wait for them to finish."""
        self.running = False
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                logger.debug("Background task cancelled")
        self._tasks = []
