"""CLI entry point for the weather forecast tool."""

import argparse
import logging

from weatherapp.config.loader import load_config
from weatherapp.errors import DecodeError, ValidationError, WeatherAppError
from weatherapp.models.forecast import ForecastOptions
from weatherapp.models.location import CityQuery
from weatherapp.pipeline.forecast_pipeline import ForecastPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather",
        description="Weather Forecast Tool. Weekly weather forecast for a city.",
        allow_abbrev=False,
    )

    mandatory = parser.add_argument_group("mandatory flags")
    mandatory.add_argument(
        "-city", "--city", default="",
        help="Name of the city (e.g., 'The Hague')",
    )
    mandatory.add_argument(
        "-country", "--country", default="",
        help="Country of the city (e.g., 'Netherlands')",
    )

    optional = parser.add_argument_group("optional flags")
    optional.add_argument(
        "-day", "--day", default="",
        help="Day of interest (informational, the whole week is shown)",
    )
    optional.add_argument(
        "-p", "--precipitation", action="store_true", help="Get precipitation"
    )
    optional.add_argument(
        "-uv", "--uv", action="store_true", help="Get UV index"
    )
    optional.add_argument(
        "-sunrise", "--sunrise", action="store_true", help="Get sunrise time"
    )
    optional.add_argument(
        "-sunset", "--sunset", action="store_true", help="Get sunset time"
    )
    optional.add_argument(
        "-f", "--fahrenheit", action="store_true", help="Use fahrenheit"
    )
    optional.add_argument("--config", default=None, help="Config YAML path")
    optional.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )
    return parser


def city_query(args: argparse.Namespace) -> CityQuery:
    city = args.city.strip()
    country = args.country.strip()
    if not city or not country:
        raise ValidationError("Both -city and -country are required")
    return CityQuery(name=city, country=country)


def forecast_options(args: argparse.Namespace) -> ForecastOptions:
    return ForecastOptions(
        include_precipitation=args.precipitation,
        include_sunrise=args.sunrise,
        include_sunset=args.sunset,
        include_uv_index=args.uv,
        use_fahrenheit=args.fahrenheit,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        query = city_query(args)
    except ValidationError:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.day:
        logger.info("Day %s requested; showing the full forecast window", args.day)

    config = load_config(args.config)
    pipeline = ForecastPipeline(config)

    try:
        for line in pipeline.run(query, forecast_options(args)):
            print(line)
    except DecodeError as e:
        print(f"Error: {e}")
        return 1
    except WeatherAppError as e:
        print(e)
        return 1
    return 0
