import json
import os
from pathlib import Path


def load_config(path) -> dict:
    """Read a JSON configuration file into a dict."""
    with open(Path(path), encoding="utf-8") as f:
        return json.load(f)


def get_effective_config_value(name: str, config: dict) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Config value (case-insensitive)
        2. System environment variable (case-insensitive)

    Args:
        name (str): Variable name (case-insensitive, e.g. "BASE_URL")
        config (dict): Configuration dictionary loaded from config.json

    Returns:
        str | None: Effective value or None if not found or empty
    """
    name_lower = name.lower()

    for key, value in config.items():
        if key.lower() == name_lower and value not in (None, ""):
            return str(value)

    for key, value in os.environ.items():
        if key.lower() == name_lower and value:
            return value

    return None


def parse_bool(value) -> bool:
    """Interpret "true"/"false" style CLI and JSON values."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)
