"""Open-Meteo geocoding API client."""

import logging

from weatherapp.config.schema import DEFAULT_USER_AGENT, GEOCODING_BASE_URL
from weatherapp.ingest.http_json import get_json

logger = logging.getLogger(__name__)


class GeocodingClient:
    def __init__(
        self,
        base_url: str = GEOCODING_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        result_count: int = 10,
        language: str = "en",
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.result_count = result_count
        self.language = language

    def search(self, name: str) -> dict:
        """Look up candidate locations for a place name.

        Coordinates come back as Decimal so they keep the provider's text.
        """
        url = f"{self.base_url}/v1/search"
        params = {
            "name": name,
            "count": self.result_count,
            "language": self.language,
            "format": "json",
        }
        logger.debug("Geocoding %r", name)
        return get_json(
            url,
            params,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            exact_decimals=True,
        )
