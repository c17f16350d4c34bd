"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com"
FORECAST_BASE_URL = "https://api.open-meteo.com"
DEFAULT_USER_AGENT = "weatherapp/0.1.0"


class UnitStrategy(StrEnum):
    CLIENT = "client"      # provider returns Celsius, renderer converts
    PROVIDER = "provider"  # provider is asked for Fahrenheit directly


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_base_url: str = GEOCODING_BASE_URL
    forecast_base_url: str = FORECAST_BASE_URL
    geocoding_result_count: int = Field(default=10, ge=1, le=100)
    language: str = "en"
    unit_strategy: UnitStrategy = UnitStrategy.CLIENT


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    filled_mark: str = Field(default="*", min_length=1, max_length=1)
    blank_mark: str = Field(default=" ", min_length=1, max_length=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    http: HttpConfig = HttpConfig()
    display: DisplayConfig = DisplayConfig()
