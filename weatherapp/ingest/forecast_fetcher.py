"""Forecast fetcher: builds the Open-Meteo query and decodes the daily series."""

import logging

from weatherapp.config.schema import UnitStrategy
from weatherapp.errors import DecodeError
from weatherapp.ingest.openmeteo_client import OpenMeteoClient
from weatherapp.models.forecast import (
    ForecastDay,
    ForecastOptions,
    ForecastSeries,
    TemperatureUnit,
)
from weatherapp.models.location import Coordinate

logger = logging.getLogger(__name__)

REQUIRED_DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min")


def optional_daily_fields(options: ForecastOptions) -> list[str]:
    """Provider field names for the enabled options, in request order."""
    fields = (
        (options.include_precipitation, "precipitation_sum"),
        (options.include_sunrise, "sunrise"),
        (options.include_sunset, "sunset"),
        (options.include_uv_index, "uv_index_max"),
    )
    return [name for enabled, name in fields if enabled]


def build_forecast_params(
    coord: Coordinate,
    options: ForecastOptions,
    unit_strategy: UnitStrategy = UnitStrategy.CLIENT,
) -> dict[str, str]:
    """Query parameters for one forecast request.

    timezone=auto makes the provider cut days at local midnight.
    """
    daily = [*REQUIRED_DAILY_FIELDS, *optional_daily_fields(options)]
    params = {
        "latitude": coord.latitude,
        "longitude": coord.longitude,
        "timezone": "auto",
        "daily": ",".join(daily),
    }
    if options.use_fahrenheit and unit_strategy == UnitStrategy.PROVIDER:
        params["temperature_unit"] = "fahrenheit"
    return params


class ForecastFetcher:
    def __init__(
        self,
        client: OpenMeteoClient,
        unit_strategy: UnitStrategy = UnitStrategy.CLIENT,
    ):
        self.client = client
        self.unit_strategy = unit_strategy

    def fetch(self, coord: Coordinate, options: ForecastOptions) -> ForecastSeries:
        """Fetch the full forecast window for a coordinate in one request."""
        params = build_forecast_params(coord, options, self.unit_strategy)
        raw = self.client.get_forecast(params)
        series = parse_forecast(raw)
        logger.info(
            "Fetched %d forecast days for %s,%s",
            len(series), coord.latitude, coord.longitude,
        )
        return series


def parse_forecast(raw: dict) -> ForecastSeries:
    """Decode the parallel arrays of the "daily" block into ForecastDays.

    Optional arrays shorter than the max-temperature array leave the
    trailing days without that field.
    """
    daily = raw.get("daily")
    if not isinstance(daily, dict):
        raise DecodeError("Forecast response has no 'daily' object")

    max_temps = daily.get("temperature_2m_max")
    if not isinstance(max_temps, list):
        raise DecodeError("Forecast response has no 'temperature_2m_max' array")

    dates = _array(daily, "time")
    min_temps = _array(daily, "temperature_2m_min")
    precip = _array(daily, "precipitation_sum")
    uv = _array(daily, "uv_index_max")
    sunrise = _array(daily, "sunrise")
    sunset = _array(daily, "sunset")

    days: list[ForecastDay] = []
    for i, temp in enumerate(max_temps):
        if isinstance(temp, bool) or not isinstance(temp, (int, float)):
            raise DecodeError(f"Non-numeric max temperature at day {i}: {temp!r}")
        days.append(
            ForecastDay(
                date=str(_at(dates, i) or ""),
                max_temperature=float(temp),
                min_temperature=_float_at(min_temps, i),
                precipitation_mm=_float_at(precip, i),
                uv_index_max=_float_at(uv, i),
                sunrise=_at(sunrise, i),
                sunset=_at(sunset, i),
            )
        )

    return ForecastSeries(days=tuple(days), temperature_unit=_temperature_unit(raw))


def _temperature_unit(raw: dict) -> TemperatureUnit:
    units = raw.get("daily_units") or {}
    if "F" in str(units.get("temperature_2m_max", "")):
        return TemperatureUnit.FAHRENHEIT
    return TemperatureUnit.CELSIUS


def _array(daily: dict, key: str) -> list:
    value = daily.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"Forecast field '{key}' is not an array")
    return value


def _at(values: list, i: int):
    return values[i] if i < len(values) else None


def _float_at(values: list, i: int) -> float | None:
    value = _at(values, i)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Expected a number, got {value!r}")
    return float(value)
