"""WMO weather code classification.

Maps Open-Meteo ``weather_code`` values to a label and an emoji icon.
"""

from __future__ import annotations

from weather_dashboard.schemas import Condition

# WMO Weather Interpretation Codes (https://open-meteo.com/en/docs)
WMO_CONDITIONS: dict[int, tuple[str, str]] = {
    0: ("Clear", "☀️"),
    1: ("Mainly clear", "\U0001f324️"),
    2: ("Partly cloudy", "⛅"),
    3: ("Cloudy", "☁️"),
    45: ("Fog", "\U0001f32b️"),
    48: ("Depositing rime fog", "\U0001f32b️"),
    51: ("Light drizzle", "\U0001f326️"),
    53: ("Drizzle", "\U0001f326️"),
    55: ("Heavy drizzle", "\U0001f327️"),
    56: ("Freezing drizzle", "\U0001f327️"),
    57: ("Freezing drizzle", "\U0001f327️"),
    61: ("Light rain", "\U0001f327️"),
    63: ("Rain", "\U0001f327️"),
    65: ("Heavy rain", "\U0001f327️"),
    66: ("Freezing rain", "\U0001f327️"),
    67: ("Freezing rain", "\U0001f327️"),
    71: ("Light snow", "\U0001f328️"),
    73: ("Snow", "\U0001f328️"),
    75: ("Heavy snow", "❄️"),
    77: ("Snow grains", "\U0001f328️"),
    80: ("Rain showers", "\U0001f326️"),
    81: ("Rain showers", "\U0001f326️"),
    82: ("Violent rain showers", "⛈️"),
    85: ("Snow showers", "\U0001f328️"),
    86: ("Snow showers", "❄️"),
    95: ("Thunderstorm", "⛈️"),
    96: ("Thunderstorm + hail", "⛈️"),
    99: ("Thunderstorm + hail", "⛈️"),
}

UNKNOWN_TEXT = "—"
DAY_ICON = "☀️"
NIGHT_ICON = "\U0001f319"


def classify(code: int, is_day: bool = True) -> Condition:
    """Return the label and icon for a WMO code.

    Defined for every integer: codes outside the table get ``"—"`` and a
    sun or moon icon depending on ``is_day``.
    """
    entry = WMO_CONDITIONS.get(code)
    if entry is None:
        return Condition(text=UNKNOWN_TEXT, icon=DAY_ICON if is_day else NIGHT_ICON)
    text, icon = entry
    return Condition(text=text, icon=icon)
