#!/usr/bin/env python3
"""
CLI entry point for the CVar console (cvar-console command).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cvar_console.config import ConfigManager, ConsoleConfig, get_config_manager
from cvar_console.console import (
    BufferedShell,
    ConfigCommand,
    ConsoleHost,
    CVarCommand,
    StdoutShell,
    format_table,
    snapshot,
)
from cvar_console.core import CVarRegistry
from cvar_console.cvars import CVars
from cvar_console.localization import Localization
from cvar_console.log import close_logging, configure_logging


def build_host(
    registry: CVarRegistry,
    localization: Localization,
    redact_reads: bool = False,
    config_manager: ConfigManager | None = None,
) -> ConsoleHost:
    """Create a console host serving the cvar command for registry.

    The config command is added when a config_manager is given.
    """
    host = ConsoleHost(localization.translate)
    host.register(CVarCommand(registry, localization.translate, redact_reads=redact_reads))
    if config_manager is not None:
        host.register(ConfigCommand(config_manager, localization.translate))
    return host


def run_commands(host: ConsoleHost, commands: list[str]) -> int:
    """Run command lines one by one, printing output.

    Returns:
        1 if any command reported an error, else 0.
    """
    failed = False
    for line in commands:
        shell = BufferedShell()
        host.execute(line, shell)
        for text in shell.lines:
            print(text)
        for text in shell.errors:
            print(text, file=sys.stderr)
        failed = failed or bool(shell.errors)
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvar-console",
        description="Inspect and change CVars from an interactive console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    cvar-console                          # interactive console
    cvar-console -e "cvar ?"              # list CVar names
    cvar-console -e "cvar fps_max 144" -e "cvar fps_max"
    cvar-console --list                   # table of all CVars
    cvar-console -e "config set redact_reads true"
        """,
    )
    parser.add_argument(
        "-e", "--exec", dest="commands", action="append", metavar="CMD",
        help="Run a command and exit (repeatable)",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="Print every CVar with its type and value (confidential values hidden)",
    )
    parser.add_argument("--locale", help="Message catalog locale")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--log-file", type=Path, help="Write logs to this file")
    parser.add_argument(
        "--redact-reads", action="store_true", default=None,
        help="Hide confidential values when read with 'cvar <name>'",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cvar-console CLI."""
    args = build_parser().parse_args(argv)
    cfg_mgr = get_config_manager()
    cfg = cfg_mgr.config

    log_file = args.log_file or (Path(cfg.get("log_file")) if cfg.get("log_file") else None)
    try:
        configure_logging(args.log_level or cfg.get("log_level"), log_file)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        return _run(args, cfg_mgr, cfg)
    finally:
        close_logging()


def _run(args: argparse.Namespace, cfg_mgr: ConfigManager, cfg: ConsoleConfig) -> int:
    """Build the registry and host, then list, execute or start the REPL."""
    try:
        localization = Localization.load(args.locale or cfg.get("locale"))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    redact_reads = args.redact_reads if args.redact_reads is not None else cfg.get("redact_reads")

    registry = CVarRegistry()
    registry.register_defs(CVars)
    host = build_host(registry, localization, redact_reads=redact_reads, config_manager=cfg_mgr)

    if args.list:
        print(format_table(snapshot(registry, localization.translate("cmd-cvar-value-hidden"))))
        return 0

    if args.commands:
        return run_commands(host, args.commands)

    from cvar_console.cli.repl import repl
    repl(host, Path(cfg.get("history_file")), StdoutShell())
    return 0


if __name__ == "__main__":
    sys.exit(main())
