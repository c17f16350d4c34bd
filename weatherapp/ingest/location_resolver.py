"""Location resolver: city/country pair to coordinates."""

import logging

from weatherapp.errors import DecodeError, NoMatchError
from weatherapp.ingest.geocoding_client import GeocodingClient
from weatherapp.models.location import CityQuery, Coordinate, GeocodingResult

logger = logging.getLogger(__name__)


class LocationResolver:
    def __init__(self, geocoding_client: GeocodingClient):
        self.geocoding = geocoding_client

    def resolve(self, query: CityQuery) -> Coordinate:
        """Return the coordinates of the first candidate in query.country.

        Candidates are scanned in provider order; the country comparison is
        exact. Raises NoMatchError when nothing matches.
        """
        raw = self.geocoding.search(query.name)
        candidates = _parse_results(raw)
        logger.debug(
            "Geocoder returned %d candidates for %r", len(candidates), query.name
        )

        for candidate in candidates:
            if candidate.country == query.country:
                logger.info(
                    "Resolved %s, %s to %s (%s,%s)",
                    query.name, query.country, candidate.name,
                    candidate.latitude, candidate.longitude,
                )
                return candidate.coordinate

        raise NoMatchError(query.name, query.country)


def _parse_results(raw: dict) -> list[GeocodingResult]:
    """Decode the geocoding payload.

    The provider omits "results" entirely when nothing is found.
    """
    results = raw.get("results", [])
    if not isinstance(results, list):
        raise DecodeError("Geocoding 'results' is not a list")

    parsed: list[GeocodingResult] = []
    for r in results:
        if not isinstance(r, dict):
            raise DecodeError("Geocoding result is not an object")
        try:
            latitude = r["latitude"]
            longitude = r["longitude"]
        except KeyError as e:
            raise DecodeError(f"Geocoding result missing {e}") from e
        parsed.append(
            GeocodingResult(
                name=str(r.get("name") or ""),
                latitude=str(latitude),
                longitude=str(longitude),
                country=str(r.get("country") or ""),
            )
        )
    return parsed
