"""Forecast pipeline: resolve, fetch, render for one invocation."""

import logging
from collections.abc import Iterator

from weatherapp.config.schema import AppConfig
from weatherapp.ingest.forecast_fetcher import ForecastFetcher
from weatherapp.ingest.geocoding_client import GeocodingClient
from weatherapp.ingest.location_resolver import LocationResolver
from weatherapp.ingest.openmeteo_client import OpenMeteoClient
from weatherapp.models.forecast import ForecastOptions
from weatherapp.models.location import CityQuery
from weatherapp.reporting.renderer import render

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        config: AppConfig,
        resolver: LocationResolver | None = None,
        fetcher: ForecastFetcher | None = None,
    ):
        self.config = config
        self.resolver = resolver or LocationResolver(
            GeocodingClient(
                base_url=config.provider.geocoding_base_url,
                user_agent=config.http.user_agent,
                timeout=config.http.timeout_seconds,
                result_count=config.provider.geocoding_result_count,
                language=config.provider.language,
            )
        )
        self.fetcher = fetcher or ForecastFetcher(
            OpenMeteoClient(
                base_url=config.provider.forecast_base_url,
                user_agent=config.http.user_agent,
                timeout=config.http.timeout_seconds,
            ),
            unit_strategy=config.provider.unit_strategy,
        )

    def run(self, query: CityQuery, options: ForecastOptions) -> Iterator[str]:
        """Resolve and fetch eagerly, then return the lazy report lines.

        Lookup failures propagate before any line is produced.
        """
        coord = self.resolver.resolve(query)
        series = self.fetcher.fetch(coord, options)
        logger.debug("Rendering %d days with %s", len(series), options)
        return render(series, options, self.config.display)
