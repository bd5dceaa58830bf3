"""
Message catalog for user-facing console text.

Every message the console prints is looked up by key and formatted with
named arguments:

    loc = Localization.load("en-US")
    loc.translate("cmd-cvar-not-registered", cvar="fps_max")

Catalogs are YAML files with a top-level ``messages`` mapping. The package
ships ``en-US.yaml``; other catalogs can be loaded from any path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# translate(key, **named_args) -> str
Translate = Callable[..., str]


class _KeepMissing(dict):
    """format_map mapping that leaves unknown placeholders untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class Localization:
    """Key -> template catalog."""

    def __init__(self, messages: dict[str, str] | None = None, locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self._messages: dict[str, str] = dict(messages or {})
        self._warned: set[str] = set()

    @classmethod
    def from_yaml(cls, path: Path, locale: str | None = None) -> Localization:
        """Load a catalog from a YAML file.

        Raises:
            OSError: If the file cannot be read.
            yaml.YAMLError: If the file is not valid YAML.
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        messages = data.get("messages", {}) or {}
        return cls(
            {str(k): str(v) for k, v in messages.items()},
            locale=locale or path.stem,
        )

    @classmethod
    def load(cls, locale: str = DEFAULT_LOCALE) -> Localization:
        """Load a catalog shipped with the package."""
        from importlib.resources import as_file, files

        resource = files("cvar_console.localization").joinpath(f"{locale}.yaml")
        if not resource.is_file():
            raise FileNotFoundError(f"No catalog for locale: {locale}")
        with as_file(resource) as path:
            return cls.from_yaml(path, locale=locale)

    def has(self, key: str) -> bool:
        return key in self._messages

    def translate(self, key: str, /, **args: Any) -> str:
        """Format the message for key with named arguments.

        Unknown keys return the key itself.
        """
        template = self._messages.get(key)
        if template is None:
            if key not in self._warned:
                self._warned.add(key)
                logger.warning(f"Missing translation for '{key}' ({self.locale})")
            return key
        return template.format_map(_KeepMissing(args))

    __call__ = translate


__all__ = ["DEFAULT_LOCALE", "Localization", "Translate"]
