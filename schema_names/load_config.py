"""Logic for loading configuration files over the defaults."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "validation": {
        # Allow a leading dot in namespaces written by non-conformant producers.
        "relaxed": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Each section is updated key by key; sections the defaults do not know are
    kept as given.
    """
    user_config: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        else:
            logger.warning("Config file %s not found. Using defaults.", path)

    config: dict[str, Any] = {
        section: dict(values) for section, values in DEFAULT_CONFIG.items()
    }
    for section, values in user_config.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)
        else:
            config[section] = values
    return config
