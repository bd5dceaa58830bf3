"""
Configuration management for cvar-console.

Provides a configuration file at ~/.cvar_console/config.json for console
settings. CVar values themselves are never stored here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# Default values - single source of truth
DEFAULTS = {
    "locale": "en-US",
    "log_level": "WARNING",
    "log_file": None,
    "history_file": str(Path.home() / ".cvar_console" / "history"),
    "redact_reads": False,
}


class ConsoleConfig(BaseModel):
    """Configuration settings for cvar-console.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    locale: Optional[str] = Field(
        default=None,
        description="Message catalog locale (e.g. 'en-US')"
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Write logs to this file instead of stderr"
    )
    history_file: Optional[str] = Field(
        default=None,
        description="REPL command history file"
    )
    redact_reads: Optional[bool] = Field(
        default=None,
        description="Hide CONFIDENTIAL values when read with 'cvar <name>'"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".cvar_console"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[ConsoleConfig] = None

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> ConsoleConfig:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> ConsoleConfig:
        """Load configuration from file.

        Returns:
            Config with loaded settings, or defaults if the file is missing
            or invalid.
        """
        if not self.CONFIG_FILE.exists():
            return ConsoleConfig()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return ConsoleConfig.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Invalid config file {self.CONFIG_FILE} ({e}), using defaults")
            return ConsoleConfig()

    def save(self, config: Optional[ConsoleConfig] = None) -> Path:
        """Save configuration to file, preserving unknown keys.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        self._ensure_dir()
        if config is not None:
            self._config = config

        if self._config is None:
            self._config = ConsoleConfig()

        existing_data = {}
        if self.CONFIG_FILE.exists():
            try:
                existing_data = json.loads(self.CONFIG_FILE.read_text())
            except json.JSONDecodeError:
                logger.warning(f"Overwriting invalid config file {self.CONFIG_FILE}")

        for key, value in self._config.model_dump().items():
            if value is not None:
                existing_data[key] = value

        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")
        return self.CONFIG_FILE

    def set(self, key: str, value: Any) -> None:
        """Set a config value and save.

        Raises:
            ValueError: If key is not a config field.
        """
        self._config = self.load()

        if key not in ConsoleConfig.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        setattr(self._config, key, value)
        self.save()

    def unset(self, key: str) -> None:
        """Remove a config value so its default applies again.

        Raises:
            ValueError: If key is not a config field.
        """
        self._config = self.load()

        if key not in ConsoleConfig.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        setattr(self._config, key, None)

        if not self.CONFIG_FILE.exists():
            return
        try:
            existing_data = json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            logger.warning(f"Invalid config file {self.CONFIG_FILE}, leaving it unchanged")
            return

        if key in existing_data:
            del existing_data[key]
            self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback."""
        return self.config.get(key, default)

    def list_settings(self) -> dict[str, Any]:
        """List user-customized settings (values that differ from defaults)."""
        result = {}
        for k, v in self.config.model_dump().items():
            if v is None:
                continue
            if k not in DEFAULTS or v != DEFAULTS[k]:
                result[k] = v
        return result

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = ConsoleConfig()
        if self.CONFIG_FILE.exists():
            self.CONFIG_FILE.unlink()


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager
