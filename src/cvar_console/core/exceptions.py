"""
Exception classes for the CVar registry and the cvar command.
"""

from __future__ import annotations

from typing import Any


class CVarError(Exception):
    """Base exception for CVar-related errors."""


class DuplicateRegistrationError(CVarError):
    """A CVar with this name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"CVar already registered: {name}")
        self.name = name


class NotRegisteredError(CVarError):
    """CVar not found in registry."""

    def __init__(self, name: str):
        super().__init__(f"CVar not registered: {name}")
        self.name = name


class TypeMismatchError(CVarError):
    """Value does not match the type the CVar was registered with."""

    def __init__(self, name: str | None, expected: Any, value: Any):
        target = f" for '{name}'" if name else ""
        super().__init__(
            f"Expected {expected}{target}, got {type(value).__name__}: {value!r}"
        )
        self.name = name
        self.expected = expected
        self.value = value


class InvalidArityError(CVarError):
    """Command invoked with the wrong number of arguments."""

    def __init__(self, count: int):
        super().__init__(f"Invalid argument count: {count}")
        self.count = count


class CVarParseError(CVarError):
    """Failed to parse user input into a typed value."""

    def __init__(self, value_type: Any, text: str):
        super().__init__(f"Could not parse {value_type} value: {text!r}")
        self.value_type = value_type
        self.text = text


class UnsupportedTypeError(CVarError):
    """No coercion is defined for the value type."""

    def __init__(self, value_type: Any):
        super().__init__(f"Unsupported CVar type: {value_type!r}")
        self.value_type = value_type
