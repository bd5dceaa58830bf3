"""
cvar_console - Typed CVar registry with a runtime console

Applications register named, typed configuration variables at startup;
operators read and change them at runtime through the ``cvar`` console
command, with values typed and displayed as strings.

Example usage:
    from cvar_console import CVarRegistry, ValueType, CVarFlags

    registry = CVarRegistry()
    registry.register("fps_max", ValueType.INTEGER32, 60)
    registry.register("net.password", ValueType.STRING, "", CVarFlags.CONFIDENTIAL)

    from cvar_console.console import BufferedShell, ConsoleHost, CVarCommand
    from cvar_console.localization import Localization

    loc = Localization.load()
    host = ConsoleHost(loc.translate)
    host.register(CVarCommand(registry, loc.translate))

    shell = BufferedShell()
    host.execute("cvar fps_max 144", shell)
    host.execute("cvar fps_max", shell)   # shell.lines == ["144"]
"""

__version__ = "0.1.0"

from cvar_console.core import (
    CVarDef,
    CVarEntry,
    CVarError,
    CVarFlags,
    CVarParseError,
    CVarRegistry,
    DuplicateRegistrationError,
    InvalidArityError,
    NotRegisteredError,
    TypeMismatchError,
    UnsupportedTypeError,
    ValueType,
    parse_value,
    render_value,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "CVarRegistry",
    "CVarDef",
    "CVarEntry",
    "CVarFlags",
    "ValueType",
    "parse_value",
    "render_value",
    # Exceptions
    "CVarError",
    "CVarParseError",
    "DuplicateRegistrationError",
    "InvalidArityError",
    "NotRegisteredError",
    "TypeMismatchError",
    "UnsupportedTypeError",
]
