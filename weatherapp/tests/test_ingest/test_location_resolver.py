"""Tests for the location resolver with a mocked geocoding client."""

import logging
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from weatherapp.errors import DecodeError, NetworkError, NoMatchError
from weatherapp.ingest.geocoding_client import GeocodingClient
from weatherapp.ingest.location_resolver import LocationResolver
from weatherapp.models.location import CityQuery, Coordinate


def _resolver(payload: dict) -> tuple[LocationResolver, MagicMock]:
    mock_geo = MagicMock(spec=GeocodingClient)
    mock_geo.search.return_value = payload
    return LocationResolver(mock_geo), mock_geo


class TestResolve:
    def test_matching_country(self, load_fixture):
        resolver, mock_geo = _resolver(load_fixture("geocoding_the_hague.json"))

        coord = resolver.resolve(CityQuery("The Hague", "Netherlands"))
        assert coord == Coordinate(latitude="52.07667", longitude="4.29861")
        mock_geo.search.assert_called_once_with("The Hague")

    def test_logs_matched_candidate_name(self, caplog):
        resolver, _ = _resolver({
            "results": [{
                "name": "Den Haag",
                "latitude": Decimal("52.07667"),
                "longitude": Decimal("4.29861"),
                "country": "Netherlands",
            }]
        })

        with caplog.at_level(logging.INFO, logger="weatherapp.ingest.location_resolver"):
            resolver.resolve(CityQuery("The Hague", "Netherlands"))
        assert "Den Haag" in caplog.text

    def test_skips_candidates_in_other_countries(self, load_fixture):
        resolver, _ = _resolver(load_fixture("geocoding_the_hague.json"))

        coord = resolver.resolve(CityQuery("The Hague", "United States"))
        assert coord.latitude == "30.63798"
        assert coord.longitude == "-81.7301"

    def test_first_match_wins(self, load_fixture):
        resolver, _ = _resolver(load_fixture("geocoding_springfield.json"))

        coord = resolver.resolve(CityQuery("Springfield", "United States"))
        # Illinois, not the later Missouri entry
        assert coord == Coordinate(latitude="39.80172", longitude="-89.64371")

    def test_decimal_text_preserved(self):
        resolver, _ = _resolver({
            "results": [{
                "name": "Quito",
                "latitude": Decimal("-0.22985"),
                "longitude": Decimal("-78.52495000"),
                "country": "Ecuador",
            }]
        })

        coord = resolver.resolve(CityQuery("Quito", "Ecuador"))
        assert coord.latitude == "-0.22985"
        assert coord.longitude == "-78.52495000"

    def test_no_match_names_city_and_country(self, load_fixture):
        resolver, _ = _resolver(load_fixture("geocoding_the_hague.json"))

        with pytest.raises(NoMatchError) as exc_info:
            resolver.resolve(CityQuery("The Hague", "Belgium"))
        err = exc_info.value
        assert err.city == "The Hague"
        assert err.country == "Belgium"
        assert str(err) == (
            "Could not find a proper location match for The Hague "
            "of country Belgium"
        )

    def test_country_match_is_exact(self, load_fixture):
        resolver, _ = _resolver(load_fixture("geocoding_the_hague.json"))

        with pytest.raises(NoMatchError):
            resolver.resolve(CityQuery("The Hague", "netherlands"))

    def test_missing_results_is_no_match(self):
        resolver, _ = _resolver({"generationtime_ms": 0.3})

        with pytest.raises(NoMatchError):
            resolver.resolve(CityQuery("Atlantis", "Greece"))

    def test_results_not_a_list(self):
        resolver, _ = _resolver({"results": "nope"})

        with pytest.raises(DecodeError):
            resolver.resolve(CityQuery("Paris", "France"))

    def test_candidate_without_coordinates(self):
        resolver, _ = _resolver({"results": [{"name": "Paris", "country": "France"}]})

        with pytest.raises(DecodeError, match="latitude"):
            resolver.resolve(CityQuery("Paris", "France"))

    def test_network_error_propagates(self):
        mock_geo = MagicMock(spec=GeocodingClient)
        mock_geo.search.side_effect = NetworkError("geocoder down")

        with pytest.raises(NetworkError, match="geocoder down"):
            LocationResolver(mock_geo).resolve(CityQuery("Paris", "France"))
        assert mock_geo.search.call_count == 1
