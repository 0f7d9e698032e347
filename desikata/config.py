import os
import yaml
from pathlib import Path
from typing import Dict, Any

from desikata import defaults

_config_cache: Dict[str, Any] = {}


def config_path() -> Path:
    override = os.getenv("DESIKATA_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path(__file__).parent / "config.yaml"


def load_config() -> Dict[str, Any]:
    """
    Load configuration from config.yaml on top of the built-in defaults.
    Cache the result to avoid repeated reads.
    """
    global _config_cache

    if _config_cache:
        return _config_cache

    merged = defaults.get_default_settings()
    path = config_path()

    if path.exists():
        with open(path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values

    _config_cache = merged
    return _config_cache


def reset() -> None:
    """Drop the cached config so the next get() re-reads the file."""
    global _config_cache
    _config_cache = {}


def get(key: str, default=None) -> Any:
    """
    Get config value using dot notation.
    Example: get("upi.large_transaction_threshold") -> 5000
    """
    config = load_config()
    keys = key.split(".")
    value = config

    for k in keys:
        if isinstance(value, dict):
            value = value.get(k)
        else:
            return default

    return value if value is not None else default
