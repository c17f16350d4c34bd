"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from weatherapp.config.schema import AppConfig, ProviderConfig

TEST_GEOCODING_URL = "https://test-geocoding.example.com"
TEST_FORECAST_URL = "https://test-forecast.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)
    return _load


@pytest.fixture
def test_config() -> AppConfig:
    """AppConfig pointed at fake provider hosts."""
    return AppConfig(
        provider=ProviderConfig(
            geocoding_base_url=TEST_GEOCODING_URL,
            forecast_base_url=TEST_FORECAST_URL,
        )
    )

