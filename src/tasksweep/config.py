"""Configuration management for tasksweep."""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from .core.footprint import FootprintModel

logger = logging.getLogger(__name__)

TASKSWEEP_HOME = Path(os.environ.get("TASKSWEEP_HOME", Path.home() / ".tasksweep"))
CONFIG_FILE = TASKSWEEP_HOME / "config" / "tasksweep.conf"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Config keys that override FootprintModel fields of the same name
FOOTPRINT_KEYS = (
    "object_overhead",
    "bytes_per_number",
    "bytes_per_string",
    "collection_overhead",
    "pointer_size",
)


@dataclass
class Config:
    """tasksweep configuration."""

    tasks_file: str = ""
    log_level: str = "WARNING"
    footprint: FootprintModel = field(default_factory=FootprintModel)


def _unquote(value: str) -> str:
    """Strip matching quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from tasksweep.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    logger.debug(f"Loading config from {CONFIG_FILE}")
    footprint_overrides: dict[str, int] = {}

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "tasks_file":
                config.tasks_file = value
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value!r}")
            case _ if key in FOOTPRINT_KEYS:
                try:
                    footprint_overrides[key] = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-integer {key.upper()}: {value!r}")
            case _:
                logger.debug(f"Unknown config key: {key}")

    if footprint_overrides:
        config.footprint = replace(config.footprint, **footprint_overrides)

    return config
