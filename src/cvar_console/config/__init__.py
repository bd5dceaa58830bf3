"""Configuration management for cvar-console."""

from cvar_console.config.config import (
    DEFAULTS,
    ConfigManager,
    ConsoleConfig,
    get_config_manager,
)

__all__ = [
    "DEFAULTS",
    "ConfigManager",
    "ConsoleConfig",
    "get_config_manager",
]
