"""Config command - show, set and delete console settings."""
from __future__ import annotations

import logging
from typing import Sequence

from pydantic import ValidationError

from cvar_console.config import DEFAULTS, ConfigManager, ConsoleConfig
from cvar_console.console.shell import (
    CompletionOption,
    CompletionResult,
    ConsoleShell,
)
from cvar_console.localization import Translate

logger = logging.getLogger(__name__)

SUBCOMMANDS = ("set", "del", "reset")


class ConfigCommand:
    """The ``config`` console command.

    Usage:
        config                    show the settings that differ from defaults
        config set <key> <value>  store a setting
        config del <key>          remove a setting
        config reset              remove all settings
    """

    command = "config"

    def __init__(self, manager: ConfigManager, translate: Translate):
        self.manager = manager
        self.translate = translate

    @property
    def description(self) -> str:
        return self.translate("cmd-config-desc")

    @property
    def help(self) -> str:
        return self.translate("cmd-config-help")

    def execute(self, shell: ConsoleShell, args: Sequence[str]) -> None:
        if not args:
            self._show(shell)
            return

        sub, rest = args[0], list(args[1:])
        if sub == "set" and len(rest) == 2:
            self._set(shell, rest[0], rest[1])
        elif sub == "del" and len(rest) == 1:
            self._unset(shell, rest[0])
        elif sub == "reset" and not rest:
            self.manager.reset()
            logger.info("Console config reset")
            shell.write_line(self.translate("cmd-config-reset"))
        else:
            shell.write_error(self.translate("cmd-config-invalid-args"))

    def _show(self, shell: ConsoleShell) -> None:
        shell.write_line(self.translate("cmd-config-file", path=self.manager.CONFIG_FILE))
        settings = self.manager.list_settings()
        if not settings:
            shell.write_line("  " + self.translate("cmd-config-no-settings"))
        for key, value in settings.items():
            shell.write_line(f"  {key}: {value}")

    def _set(self, shell: ConsoleShell, key: str, text: str) -> None:
        if key not in ConsoleConfig.model_fields:
            shell.write_error(self.translate("cmd-config-unknown-key", key=key))
            return

        # Let the model coerce the text ("true" -> True for flags)
        try:
            value = getattr(ConsoleConfig.model_validate({key: text}), key)
        except ValidationError:
            shell.write_error(self.translate("cmd-config-invalid-value", key=key, value=text))
            return

        self.manager.set(key, value)
        logger.info(f"Console config {key} set")
        shell.write_line(self.translate("cmd-config-set", key=key, value=value))

    def _unset(self, shell: ConsoleShell, key: str) -> None:
        if key not in ConsoleConfig.model_fields:
            shell.write_error(self.translate("cmd-config-unknown-key", key=key))
            return

        self.manager.unset(key)
        logger.info(f"Console config {key} removed")
        shell.write_line(self.translate("cmd-config-del", key=key, default=DEFAULTS.get(key)))

    def get_completion(self, args: Sequence[str]) -> CompletionResult:
        if len(args) <= 1:
            return CompletionResult.from_options(
                (
                    CompletionOption(value=sub, hint=self.translate(f"cmd-config-compl-{sub}"))
                    for sub in SUBCOMMANDS
                ),
                self.translate("cmd-config-arg-sub"),
            )

        sub = args[0]
        if len(args) == 2 and sub in ("set", "del"):
            return CompletionResult.from_options(
                (
                    CompletionOption(value=key, hint=str(self.manager.get(key)))
                    for key in ConsoleConfig.model_fields
                ),
                self.translate("cmd-config-arg-key"),
            )

        if len(args) == 3 and sub == "set":
            return CompletionResult.from_hint(self.translate("cmd-config-arg-value"))

        return CompletionResult.empty()
