"""Error taxonomy for a single forecast invocation.

Every failure is terminal: nothing is retried, the CLI prints the message
and exits non-zero.
"""


class WeatherAppError(Exception):
    """Base class for all weatherapp failures."""


class ValidationError(WeatherAppError):
    """Required user input is missing or empty."""


class NoMatchError(WeatherAppError):
    """Geocoding succeeded but no candidate is in the requested country."""

    def __init__(self, city: str, country: str):
        super().__init__(
            f"Could not find a proper location match for {city} "
            f"of country {country}"
        )
        self.city = city
        self.country = country


class NetworkError(WeatherAppError):
    """An HTTP request failed to complete or returned an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherAppError):
    """A response body is not valid JSON or not of the expected shape."""
