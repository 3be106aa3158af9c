"""Weather Dashboard - personal forecast dashboard with advisories.

Architecture::

    units.py         Celsius/Fahrenheit conversion and display formatting
    conditions.py    WMO weather code -> label + icon (total mapping)
    normalizer.py    Raw Open-Meteo payload -> typed NormalizedSnapshot
    analysis/        Advisory rules and best-outdoor-window scoring
    state.py         Session state (unit, location, snapshot)
    datasources/     Open-Meteo geocoding, reverse geocoding, forecast
    renderers/       Pure data -> HTML / console text
    dashboard.py     Controller: search, locate, unit toggle, refresh, boot
    flows/           Prefect flow that builds a static dashboard page
    services/        Shared utilities (HTTP session)

Data flow: datasources -> normalizer -> state -> analysis -> renderers
"""

__version__ = "0.1.0"

from weather_dashboard.config import Settings
from weather_dashboard.schemas import AdvisoryItem, NormalizedSnapshot, Severity, Unit

__all__ = [
    "AdvisoryItem",
    "NormalizedSnapshot",
    "Settings",
    "Severity",
    "Unit",
    "__version__",
]
