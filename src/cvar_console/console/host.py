"""
Console host - tokenizes command lines and routes them to registered commands.
"""

from __future__ import annotations

import logging
import shlex
from typing import Sequence

from cvar_console.console.shell import (
    CompletionOption,
    CompletionResult,
    ConsoleCommand,
    ConsoleShell,
)
from cvar_console.localization import Translate
from cvar_console.log import log_command_exception

logger = logging.getLogger(__name__)


class ConsoleError(Exception):
    """Base exception for console host errors."""


class ConsoleHost:
    """Registry and dispatcher for console commands.

    A line such as ``cvar fps_max 144`` is split with shell quoting rules
    into a command name and its arguments, so ``cvar name "two words"``
    passes a single argument.
    """

    def __init__(self, translate: Translate):
        self.translate = translate
        self._commands: dict[str, ConsoleCommand] = {}
        self.register(HelpCommand(self))

    def register(self, command: ConsoleCommand) -> ConsoleCommand:
        """Register a command object.

        Raises:
            ConsoleError: If a command with the same name exists.
        """
        if command.command in self._commands:
            raise ConsoleError(f"Command name collision: {command.command}")
        self._commands[command.command] = command
        return command

    def get(self, name: str) -> ConsoleCommand | None:
        return self._commands.get(name)

    def all_commands(self) -> list[ConsoleCommand]:
        """Get all registered commands sorted by name."""
        return sorted(self._commands.values(), key=lambda c: c.command)

    def execute(self, line: str, shell: ConsoleShell) -> None:
        """Run one command line.

        Unknown commands and unbalanced quotes are reported on the shell.
        Exceptions escaping a command are logged with traceback and reported
        as a single error line.
        """
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            shell.write_error(self.translate("shell-parse-error", error=str(e)))
            return

        if not tokens:
            return

        name, args = tokens[0], tokens[1:]
        command = self.get(name)
        if command is None:
            shell.write_error(self.translate("shell-unknown-command", command=name))
            return

        logger.debug(f"Executing {name} with {len(args)} argument(s)")

        try:
            command.execute(shell, args)
        except Exception as e:
            message = log_command_exception(e, context=f"Command failed: {line}")
            shell.write_error(
                self.translate("shell-command-failed", command=name, error=message)
            )

    def complete(self, line: str) -> CompletionResult:
        """Completion for the text typed so far.

        A trailing space starts a new, empty argument.
        """
        tokens, in_quote = _split_partial(line)
        if not tokens or (line[-1:].isspace() and not in_quote):
            tokens.append("")

        if len(tokens) == 1:
            return CompletionResult.from_options(
                CompletionOption(value=c.command, hint=c.description)
                for c in self.all_commands()
            )

        command = self.get(tokens[0])
        if command is None:
            return CompletionResult.empty()
        return command.get_completion(tokens[1:])


def _split_partial(line: str) -> tuple[list[str], bool]:
    """Split a line that may end inside an open quote.

    Returns the tokens and whether the line ended inside a quote.
    """
    try:
        return shlex.split(line), False
    except ValueError:
        pass
    for quote in ('"', "'"):
        try:
            return shlex.split(line + quote), True
        except ValueError:
            continue
    return line.split(), False


class HelpCommand:
    """The built-in ``help`` command."""

    command = "help"

    def __init__(self, host: ConsoleHost):
        self.host = host

    @property
    def description(self) -> str:
        return self.host.translate("cmd-help-desc")

    @property
    def help(self) -> str:
        return self.host.translate("cmd-help-help")

    def execute(self, shell: ConsoleShell, args: Sequence[str]) -> None:
        if not args:
            width = max(len(c.command) for c in self.host.all_commands())
            for cmd in self.host.all_commands():
                shell.write_line(f"{cmd.command:<{width}}  {cmd.description}")
            return

        name = args[0]
        cmd = self.host.get(name)
        if cmd is None:
            shell.write_error(self.host.translate("shell-unknown-command", command=name))
            return
        shell.write_line(cmd.help)

    def get_completion(self, args: Sequence[str]) -> CompletionResult:
        if len(args) != 1:
            return CompletionResult.empty()
        return CompletionResult.from_options(
            (
                CompletionOption(value=c.command, hint=c.description)
                for c in self.host.all_commands()
            ),
            self.host.translate("cmd-help-arg-command"),
        )
