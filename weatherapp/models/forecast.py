"""Daily forecast models."""

from dataclasses import dataclass
from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


@dataclass(frozen=True)
class ForecastOptions:
    include_precipitation: bool = False
    include_sunrise: bool = False
    include_sunset: bool = False
    include_uv_index: bool = False
    use_fahrenheit: bool = False


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD, local to the forecast location
    max_temperature: float
    min_temperature: float | None = None
    precipitation_mm: float | None = None
    uv_index_max: float | None = None
    sunrise: str | None = None  # YYYY-MM-DDTHH:MM local time
    sunset: str | None = None


@dataclass(frozen=True)
class ForecastSeries:
    days: tuple[ForecastDay, ...]
    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS

    def __len__(self) -> int:
        return len(self.days)
