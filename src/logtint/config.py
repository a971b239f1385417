"""XDG directory management, configuration and logging setup for logtint."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_log_dir
from pydantic import ValidationError

from logtint.models import AppConfig

LOG_FORMAT = "%(asctime)s %(name)s[%(process)d]: %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the logtint config directory.

    Respects LOGTINT_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("LOGTINT_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("logtint"))


def get_log_dir() -> Path:
    """Get the log directory, creating it if needed.

    Respects LOGTINT_LOG_DIR environment variable if set.
    """
    d = Path(override) if (override := os.environ.get("LOGTINT_LOG_DIR")) else Path(user_log_dir("logtint"))
    d.mkdir(parents=True, exist_ok=True)
    return d


def load_config() -> AppConfig:
    """Load application config from disk, returning defaults if not found or invalid."""
    path = get_config_dir() / "config.toml"
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        return AppConfig(**data)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return AppConfig()


def configure_logging(level: str = "INFO") -> Path:
    """Send log records to a file in the log directory. Returns the log file path.

    The terminal belongs to the UI, so nothing is logged to stdout or stderr.
    """
    log_file = get_log_dir() / "logtint.log"
    numeric_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.FileHandler(log_file, mode="a", encoding="utf-8")],
        force=True,
    )
    return log_file
