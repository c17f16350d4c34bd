"""Forecast renderer: one report line per day with a relative intensity bar.

The bar is relative to the forecast window: the coldest day gets one mark,
the warmest gets five, and a flat window renders five marks everywhere.
"""

import math
from collections.abc import Iterable, Iterator
from datetime import datetime

from weatherapp.config.schema import DisplayConfig
from weatherapp.models.forecast import (
    ForecastDay,
    ForecastOptions,
    ForecastSeries,
    TemperatureUnit,
)

SCALE = 5
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


def convert_temperature(
    value: float, source: TemperatureUnit, target: TemperatureUnit
) -> float:
    if source == target:
        return value
    if target == TemperatureUnit.FAHRENHEIT:
        return value * 9 / 5 + 32
    return (value - 32) * 5 / 9


def temperature_bounds(temps: Iterable[float]) -> tuple[float, float] | None:
    """(min, max) over temps, or None when empty."""
    low: float | None = None
    high: float | None = None
    for t in temps:
        if low is None or t < low:
            low = t
        if high is None or t > high:
            high = t
    if low is None or high is None:
        return None
    return low, high


def relative_intensity(temp: float, low: float, high: float) -> int:
    """Position of temp within [low, high] on a 1..SCALE scale."""
    if high == low:
        return SCALE
    n = math.floor((temp - low) / (high - low) * SCALE)
    return max(1, min(SCALE, n))


def intensity_bar(n: int, filled: str = "*", blank: str = " ") -> str:
    n = max(0, min(SCALE, n))
    return filled * n + blank * (SCALE - n)


def clock_time(timestamp: str | None) -> str | None:
    """HH:MM from a local provider timestamp, None if absent or malformed."""
    if not timestamp:
        return None
    try:
        return datetime.strptime(timestamp, TIMESTAMP_FORMAT).strftime("%H:%M")
    except ValueError:
        return None


def _sunrise(day: ForecastDay) -> str | None:
    t = clock_time(day.sunrise)
    return f"Sunrise: {t}" if t else None


def _sunset(day: ForecastDay) -> str | None:
    t = clock_time(day.sunset)
    return f"Sunset: {t}" if t else None


def _precipitation(day: ForecastDay) -> str | None:
    if day.precipitation_mm is None:
        return None
    return f"Precip: {day.precipitation_mm:.2f} mm"


def _uv_index(day: ForecastDay) -> str | None:
    if day.uv_index_max is None:
        return None
    return f"UV Index: {day.uv_index_max:.1f}"


def optional_segments(day: ForecastDay, options: ForecastOptions) -> list[str]:
    """Enabled segments with data for this day, in display order."""
    producers = (
        (options.include_sunrise, _sunrise),
        (options.include_sunset, _sunset),
        (options.include_precipitation, _precipitation),
        (options.include_uv_index, _uv_index),
    )
    segments = []
    for enabled, produce in producers:
        if not enabled:
            continue
        segment = produce(day)
        if segment is not None:
            segments.append(segment)
    return segments


def render(
    series: ForecastSeries,
    options: ForecastOptions,
    display: DisplayConfig | None = None,
) -> Iterator[str]:
    """Yield one formatted line per forecast day, in series order."""
    display = display or DisplayConfig()
    unit = (
        TemperatureUnit.FAHRENHEIT if options.use_fahrenheit
        else TemperatureUnit.CELSIUS
    )
    temps = [
        convert_temperature(d.max_temperature, series.temperature_unit, unit)
        for d in series.days
    ]
    bounds = temperature_bounds(temps)
    if bounds is None:
        return
    low, high = bounds

    for day, temp in zip(series.days, temps):
        bar = intensity_bar(
            relative_intensity(temp, low, high),
            display.filled_mark, display.blank_mark,
        )
        parts = [f"{bar} {int(temp):02d} °{unit}"]
        if day.date:
            parts.append(day.date)
        parts.extend(optional_segments(day, options))
        yield " | ".join(parts)
