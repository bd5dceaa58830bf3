"""Cvar command - read, write and list CVars from the console."""
from __future__ import annotations

import logging
from typing import Sequence

from cvar_console.console.shell import (
    CompletionOption,
    CompletionResult,
    ConsoleShell,
)
from cvar_console.core import (
    CVarFlags,
    CVarParseError,
    CVarRegistry,
    InvalidArityError,
    NotRegisteredError,
    parse_value,
    render_value,
)
from cvar_console.localization import Translate

logger = logging.getLogger(__name__)

# Longest value shown in a completion hint before it is cut
HINT_MAX_LENGTH = 50
TRUNCATION_MARKER = "…"

LIST_TOKEN = "?"


class CVarCommand:
    """The ``cvar`` console command.

    Usage:
        cvar ?               list every registered CVar
        cvar <name>          show the current value
        cvar <name> <value>  parse and store a new value

    Reads print the value even for CONFIDENTIAL CVars unless
    ``redact_reads`` is set; completion hints always hide them.
    """

    command = "cvar"

    def __init__(
        self,
        registry: CVarRegistry,
        translate: Translate,
        redact_reads: bool = False,
    ):
        self.registry = registry
        self.translate = translate
        self.redact_reads = redact_reads

    @property
    def description(self) -> str:
        return self.translate("cmd-cvar-desc")

    @property
    def help(self) -> str:
        return self.translate("cmd-cvar-help")

    def execute(self, shell: ConsoleShell, args: Sequence[str]) -> None:
        """Run the command, reporting user errors on the shell's error channel.

        UnsupportedTypeError is not caught: it means a CVar type has no
        parser, which is a programming error.
        """
        try:
            self._run(shell, list(args))
        except InvalidArityError:
            shell.write_error(self.translate("cmd-cvar-invalid-args"))
        except NotRegisteredError as e:
            shell.write_error(self.translate("cmd-cvar-not-registered", cvar=e.name))
        except CVarParseError as e:
            shell.write_error(
                self.translate("cmd-cvar-parse-error", type=str(e.value_type))
            )

    def _run(self, shell: ConsoleShell, args: list[str]) -> None:
        if len(args) not in (1, 2):
            raise InvalidArityError(len(args))

        name = args[0]
        if len(args) == 1 and name == LIST_TOKEN:
            for cvar in self.registry.list_names():
                shell.write_line(cvar)
            return

        if not self.registry.is_registered(name):
            raise NotRegisteredError(name)

        value_type = self.registry.get_type(name)

        if len(args) == 1:
            # Read CVar
            if self.redact_reads and self._is_confidential(name):
                shell.write_line(self.translate("cmd-cvar-value-hidden"))
                return
            shell.write_line(render_value(value_type, self.registry.get_value(name)))
            return

        # Write CVar
        parsed = parse_value(value_type, args[1])
        self.registry.set_value(name, parsed)
        logger.info(f"cvar {name} set from console")

    def get_completion(self, args: Sequence[str]) -> CompletionResult:
        """Completion for the argument currently being typed.

        The last element of args is the (possibly empty) argument under the
        cursor.
        """
        if len(args) <= 1:
            options = [
                CompletionOption(value=name, hint=self._value_hint(name))
                for name in self.registry.list_names()
            ]
            options.append(CompletionOption(
                value=LIST_TOKEN,
                hint=self.translate("cmd-cvar-compl-list"),
            ))
            ordered = sorted(options, key=lambda o: (o.hint or "", o.value))
            return CompletionResult.from_options(
                ordered, self.translate("cmd-cvar-arg-name")
            )

        if len(args) > 2:
            return CompletionResult.empty()

        name = args[0]
        if not self.registry.is_registered(name):
            return CompletionResult.empty()

        return CompletionResult.from_hint(f"<{self.registry.get_type(name).value}>")

    def _is_confidential(self, name: str) -> bool:
        return bool(self.registry.get_flags(name) & CVarFlags.CONFIDENTIAL)

    def _value_hint(self, name: str) -> str:
        if self._is_confidential(name):
            return self.translate("cmd-cvar-value-hidden")

        value = render_value(self.registry.get_type(name), self.registry.get_value(name))
        if len(value) > HINT_MAX_LENGTH:
            value = value[:HINT_MAX_LENGTH] + TRUNCATION_MARKER
        return value
