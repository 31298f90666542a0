"""Configuration management for sqltab."""
from __future__ import annotations
from typing import Dict, Any, Optional
import os
import json
import logging

from sqltab.core.errors import ConfigError
from sqltab.utils.constants import (
    DEFAULT_MAX_RECORDS, DEFAULT_SYSTEM_SCHEMA, DEFAULT_SYSTEM_PREFIX,
    ENV_MAX_RECORDS, ENV_SYSTEM_PREFIX, ENV_LOG_LEVEL, LOG_LEVELS,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "max_records": DEFAULT_MAX_RECORDS,
    "system_schema": DEFAULT_SYSTEM_SCHEMA,
    "system_prefix": DEFAULT_SYSTEM_PREFIX,
    "escape_backslashes": False,
    "log_level": "WARNING",
    "history_file": "~/.sqltab_history",
}

class Config:
    """Configuration manager for sqltab settings.

    Values come from DEFAULT_CONFIG, then the JSON file, then environment
    overrides.
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        self.settings: Dict[str, Any] = DEFAULT_CONFIG.copy()
        self.config_file = os.path.expanduser(config_file or "~/.sqltab_config.json")
        self._load_config()
        self._apply_env(os.environ if environ is None else environ)

    def _load_config(self) -> None:
        """Load configuration from file if exists."""
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r') as f:
                    self.settings.update(json.load(f))
        except Exception as e:
            logger.warning(f"Failed to load config: {e}")

    def _apply_env(self, environ) -> None:
        if environ.get(ENV_MAX_RECORDS):
            self.settings["max_records"] = environ[ENV_MAX_RECORDS]
        if environ.get(ENV_SYSTEM_PREFIX):
            self.settings["system_prefix"] = environ[ENV_SYSTEM_PREFIX]
        if environ.get(ENV_LOG_LEVEL):
            self.settings["log_level"] = environ[ENV_LOG_LEVEL]

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.settings, f, indent=2)
        except Exception as e:
            logger.warning(f"Failed to save config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self.settings[key] = value

    def max_records(self) -> int:
        """Row cap for catalog queries; must be a positive integer."""
        raw = self.settings.get("max_records", DEFAULT_MAX_RECORDS)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ConfigError(f"max_records must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigError(f"max_records must be positive, got {value}")
        return value

    def log_level(self) -> str:
        """Log level name, upper-cased; must be one of LOG_LEVELS."""
        level = str(self.settings.get("log_level") or "WARNING").upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
        return level

# Global config instance
config = Config()
