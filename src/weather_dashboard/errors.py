"""Error kinds raised by the data source, normalizer and controller."""

from __future__ import annotations


class WeatherError(RuntimeError):
    """Base class for user-facing weather lookup failures."""


class NotFound(WeatherError):
    """A search or geocode query produced zero results."""


class MalformedResponse(WeatherError):
    """Provider payload is missing required fields or has mismatched sequences."""


class NetworkFailure(WeatherError):
    """Transport-level failure, including non-success status codes."""


class PermissionDenied(WeatherError):
    """Location access was refused or is unsupported on this platform."""
