"""Open-Meteo forecast API client."""

import logging

from weatherapp.config.schema import DEFAULT_USER_AGENT, FORECAST_BASE_URL
from weatherapp.ingest.http_json import get_json

logger = logging.getLogger(__name__)


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = FORECAST_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, params: dict[str, str]) -> dict:
        """Fetch the daily forecast for prepared query parameters."""
        url = f"{self.base_url}/v1/forecast"
        logger.debug("Fetching forecast with %s", params)
        return get_json(
            url,
            params,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
        )
