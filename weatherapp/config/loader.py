"""YAML config loader. Defaults apply when no file is given."""

from pathlib import Path

import yaml

from weatherapp.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    Returns the defaults without touching the filesystem when path is None.
    An empty file also yields the defaults.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)
