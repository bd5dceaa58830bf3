"""
Console surface for the CVar registry.

The ``cvar`` command reads, writes and lists CVars; the host routes command
lines and completion requests to registered commands:

    host = ConsoleHost(translate)
    host.register(CVarCommand(registry, translate))
    host.execute("cvar fps_max 144", StdoutShell())
"""

from __future__ import annotations

from cvar_console.console.command import CVarCommand
from cvar_console.console.config_command import ConfigCommand
from cvar_console.console.display import CVarView, format_table, snapshot
from cvar_console.console.host import ConsoleError, ConsoleHost, HelpCommand
from cvar_console.console.shell import (
    BufferedShell,
    CompletionOption,
    CompletionResult,
    ConsoleCommand,
    ConsoleShell,
    StdoutShell,
)

__all__ = [
    "BufferedShell",
    "CVarCommand",
    "CVarView",
    "ConfigCommand",
    "CompletionOption",
    "CompletionResult",
    "ConsoleCommand",
    "ConsoleError",
    "ConsoleHost",
    "ConsoleShell",
    "HelpCommand",
    "StdoutShell",
    "format_table",
    "snapshot",
]
