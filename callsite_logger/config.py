"""Configuration from environment variables and an optional YAML file.

Recognized keys (YAML) and their env overrides:
  colorize_logging  COLORIZE_LOGGING
  default_tag       LOG_TAG
  min_level         LOG_LEVEL
"""

import logging
import os
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    colorize_logging: bool = False
    default_tag: str | None = None
    min_level: str = "DEBUG"


_KNOWN_KEYS = {f.name for f in fields(Config)}


def load_yaml_config(path: str | None) -> dict:
    """Read the known settings from a YAML mapping.

    No path or a missing file gives {}. A document that is not a mapping is
    ignored with a warning; unknown keys are dropped with a warning.
    """
    if not path:
        return {}
    if not os.path.exists(path):
        logger.warning("Config file %s not found, using defaults", path)
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    logger.info("Loaded YAML config from %s", path)
    return {key: value for key, value in data.items() if key in _KNOWN_KEYS}


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from parsed YAML data, with environment variables taking precedence."""
    yaml_data = yaml_data or {}
    return Config(
        colorize_logging=_parse_bool(
            os.environ.get("COLORIZE_LOGGING", yaml_data.get("colorize_logging", False))
        ),
        default_tag=os.environ.get("LOG_TAG", yaml_data.get("default_tag", Config.default_tag)),
        min_level=str(
            os.environ.get("LOG_LEVEL", yaml_data.get("min_level", Config.min_level))
        ).upper(),
    )


def colorize_logging_enabled(default: bool = False) -> bool:
    """Read COLORIZE_LOGGING from the environment on every call, else default."""
    value = os.environ.get("COLORIZE_LOGGING")
    if value is None:
        return default
    return _parse_bool(value)
