"""Single-shot JSON GET shared by the Open-Meteo clients."""

import logging
from decimal import Decimal

import httpx

from weatherapp.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)


def get_json(
    url: str,
    params: dict,
    headers: dict[str, str],
    timeout: float,
    exact_decimals: bool = False,
) -> dict:
    """GET url and decode the JSON object body.

    No retries: a failed request raises NetworkError immediately. With
    exact_decimals, JSON numbers with a fraction are decoded as Decimal so
    their text survives unchanged.
    """
    try:
        resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("GET %s returned %d", url, e.response.status_code)
        raise NetworkError(str(e), status_code=e.response.status_code) from e
    except httpx.RequestError as e:
        logger.error("GET %s failed: %s", url, e)
        raise NetworkError(f"Request to {url} failed: {e}") from e

    try:
        data = resp.json(parse_float=Decimal) if exact_decimals else resp.json()
    except ValueError as e:
        logger.error("GET %s returned a non-JSON body", url)
        raise DecodeError(f"Invalid JSON from {url}: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object from {url}, got {type(data).__name__}"
        )
    return data
