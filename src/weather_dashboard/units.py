"""Unit conversion and display formatting.

Pure functions with no external dependencies. Stored values are always
Celsius and km/h; conversion to the display unit happens here, at the edge.
"""

from __future__ import annotations

import math

from weather_dashboard.schemas import Unit


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def display_temperature(celsius: float, unit: Unit) -> float:
    """Convert a stored Celsius value to the display unit without rounding."""
    if unit is Unit.FAHRENHEIT:
        return c_to_f(celsius)
    return celsius


def format_temperature(celsius: float, unit: Unit) -> str:
    """Format a Celsius value for display, e.g. ``"27°C"`` or ``"81°F"``.

    Converts first and rounds afterwards.
    """
    return f"{round_half_up(display_temperature(celsius, unit))}{unit.suffix}"


def ms_to_kmh(ms: float) -> int:
    """Convert metres per second to whole km/h."""
    return round_half_up(ms * 3.6)
