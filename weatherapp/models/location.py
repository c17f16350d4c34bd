"""Location lookup models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CityQuery:
    name: str
    country: str


@dataclass(frozen=True)
class Coordinate:
    # Decimal text as returned by the geocoder, never parsed back to float
    latitude: str
    longitude: str


@dataclass(frozen=True)
class GeocodingResult:
    name: str
    latitude: str
    longitude: str
    country: str

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)
