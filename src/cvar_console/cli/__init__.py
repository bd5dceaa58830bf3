"""
CLI module for the cvar_console package.

Provides the cvar-console entry point and the interactive REPL.
"""

from cvar_console.cli.main import build_host, main, run_commands

__all__ = [
    "build_host",
    "main",
    "run_commands",
]
