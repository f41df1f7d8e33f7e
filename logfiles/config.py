"""Configuration module: frozen dataclass loaded from YAML, env vars and CLI args."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    log_dir: str = ""  # empty means the system temp directory
    program: str = ""  # empty means the base name of sys.argv[0]
    max_size_bytes: int = 100 * 1024 * 1024  # 100 MB, not enforced
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring it", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def _max_size(yaml_data: dict) -> int:
    # MAX_SIZE_BYTES takes precedence over MAX_SIZE_MB
    raw_bytes = os.environ.get("MAX_SIZE_BYTES")
    raw_mb = os.environ.get("MAX_SIZE_MB")
    if raw_bytes is not None:
        return int(raw_bytes)
    if raw_mb is not None:
        return int(float(raw_mb) * 1024 * 1024)
    raw_yaml = yaml_data.get("max_size_bytes")
    if raw_yaml is None:
        return Config.max_size_bytes
    return int(raw_yaml)


def _yaml_str(yaml_data: dict, key: str, default: str) -> str:
    # a key with no value loads as None and means "not set"
    value = yaml_data.get(key)
    return default if value is None else str(value)


def load_config(yaml_data: dict | None = None, **overrides) -> Config:
    """Build Config from defaults <- YAML <- env vars <- explicit overrides.

    Overrides whose value is None are ignored so argparse namespaces can be
    passed straight through.
    """
    yaml_data = yaml_data or {}
    kwargs = {
        "log_dir": os.environ.get("LOG_DIR", _yaml_str(yaml_data, "log_dir", Config.log_dir)),
        "program": os.environ.get("LOG_PROGRAM", _yaml_str(yaml_data, "program", Config.program)),
        "max_size_bytes": _max_size(yaml_data),
        "log_level": os.environ.get(
            "LOG_LEVEL", _yaml_str(yaml_data, "log_level", Config.log_level)
        ).upper(),
    }
    for key, value in overrides.items():
        if key not in kwargs:
            raise TypeError(f"unknown config option: {key}")
        if value is not None:
            kwargs[key] = value
    return Config(**kwargs)
