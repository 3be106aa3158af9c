"""Rule-based advisories derived from a normalized forecast.

Rules run in a fixed order and each appends at most one item. The order of
the returned list is the display order; it is never re-sorted by severity.

  1. Rain today            >=60% caution, else >=30% info
  2. Heat today            >=35°C danger, else >=30°C caution
  3. Wind today            >=40 km/h caution
  4. UV today              >=7 caution
  5. Best outdoor window   highest-scoring hour in 06:00-18:00, info
  6. Tomorrow hotter       max temp up >=4°C, caution (needs 2 days)
  7. Tomorrow rain         >=60%, caution (needs 2 days)
  8. Clear skies           today's condition label contains "Clear", info
"""

from __future__ import annotations

from weather_dashboard.conditions import classify
from weather_dashboard.schemas import AdvisoryItem, HourlySeries, NormalizedSnapshot, Severity
from weather_dashboard.units import round_half_up

# Hourly scan range for the best outdoor window, end-exclusive (06:00-18:00)
WINDOW_START = 6
WINDOW_END = 19

# Neutral substitutes for missing hourly values
COMFORT_TEMP_C = 24.0
MISSING_PCT = 100.0


def score_hour(
    temperature_c: float | None,
    precipitation_probability_pct: float | None,
    cloud_cover_pct: float | None,
) -> float:
    """Comfort score for one hour: mild, dry and clear scores highest."""
    temp = COMFORT_TEMP_C if temperature_c is None else temperature_c
    rain = MISSING_PCT if precipitation_probability_pct is None else precipitation_probability_pct
    cloud = MISSING_PCT if cloud_cover_pct is None else cloud_cover_pct
    return (40 - abs(COMFORT_TEMP_C - temp)) + (100 - rain) * 0.4 + (100 - cloud) * 0.1


def best_outdoor_index(hourly: HourlySeries) -> int | None:
    """
    Find the best hour for outdoor activity.

    Scans indices 6-18 (clipped to the series length). The first index with
    the strictly greatest score wins.

    Returns:
        Index into ``hourly``, or None when no index was evaluated.
    """
    best_idx: int | None = None
    best_score = 0.0
    for i in range(WINDOW_START, min(WINDOW_END, len(hourly))):
        score = score_hour(
            hourly.temperature_c[i],
            hourly.precipitation_probability_pct[i],
            hourly.cloud_cover_pct[i],
        )
        if best_idx is None or score > best_score:
            best_idx, best_score = i, score
    return best_idx


def _rain_today(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    rain = snapshot.daily.precip_prob_max_pct[0]
    if rain >= 60:
        return AdvisoryItem(
            text="Likely rain today. Carry an umbrella and waterproof your bag.",
            severity=Severity.CAUTION,
        )
    if rain >= 30:
        return AdvisoryItem(
            text="Chance of showers. A compact umbrella could help.",
            severity=Severity.INFO,
        )
    return None


def _heat_today(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    tmax = snapshot.daily.temp_max_c[0]
    if tmax >= 35:
        return AdvisoryItem(
            text=(
                "Extreme heat expected. Hydrate, avoid direct sun 12–4 pm, "
                "and wear light clothing."
            ),
            severity=Severity.DANGER,
        )
    if tmax >= 30:
        return AdvisoryItem(
            text="Warm day. Drink water and plan outdoor tasks for morning or evening.",
            severity=Severity.CAUTION,
        )
    return None


def _wind_today(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    if snapshot.daily.wind_max_kmh[0] >= 40:
        return AdvisoryItem(
            text="It will be windy. Secure loose items and be careful on two-wheelers.",
            severity=Severity.CAUTION,
        )
    return None


def _uv_today(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    if snapshot.daily.uv_index_max[0] >= 7:
        return AdvisoryItem(
            text="High UV around midday. Use sunscreen and sunglasses.",
            severity=Severity.CAUTION,
        )
    return None


def _best_window(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    idx = best_outdoor_index(snapshot.hourly)
    if idx is None:
        return None
    hour = snapshot.hourly.time[idx].strftime("%H:00")
    return AdvisoryItem(text=f"Best time for a walk: ~{hour}", severity=Severity.INFO)


def _tomorrow_hotter(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    if len(snapshot.daily) < 2:
        return None
    delta = snapshot.daily.temp_max_c[1] - snapshot.daily.temp_max_c[0]
    if delta >= 4:
        return AdvisoryItem(
            text=f"Tomorrow will be hotter by ~{round_half_up(delta)}°C. Plan accordingly.",
            severity=Severity.CAUTION,
        )
    return None


def _tomorrow_rain(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    if len(snapshot.daily) < 2:
        return None
    if snapshot.daily.precip_prob_max_pct[1] >= 60:
        return AdvisoryItem(
            text="High chance of rain tomorrow. Schedule errands in the morning.",
            severity=Severity.CAUTION,
        )
    return None


def _clear_night(snapshot: NormalizedSnapshot) -> AdvisoryItem | None:
    if "Clear" in classify(snapshot.daily.weather_code[0], True).text:
        return AdvisoryItem(
            text="Clear skies tonight. Good conditions for stargazing after sunset.",
            severity=Severity.INFO,
        )
    return None


RULES = (
    _rain_today,
    _heat_today,
    _wind_today,
    _uv_today,
    _best_window,
    _tomorrow_hotter,
    _tomorrow_rain,
    _clear_night,
)


def generate_advisories(snapshot: NormalizedSnapshot) -> list[AdvisoryItem]:
    """Evaluate every rule in order and collect the items that fire."""
    items = []
    for rule in RULES:
        item = rule(snapshot)
        if item is not None:
            items.append(item)
    return items
