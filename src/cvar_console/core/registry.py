"""
CVar Registry for registering and accessing typed configuration variables.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterator

from cvar_console.core.datamodels import CVarDef, CVarEntry, CVarFlags, ValueType
from cvar_console.core.exceptions import (
    DuplicateRegistrationError,
    NotRegisteredError,
    TypeMismatchError,
)
from cvar_console.core.values import as_value_type, check_value

logger = logging.getLogger(__name__)


class CVarRegistry:
    """Registry of typed CVars.

    A single lock guards the name -> entry mapping. Values are replaced
    whole under the lock, so concurrent readers never see a partial write.
    Registration is expected to finish before the registry is shared.
    """

    def __init__(self):
        self._cvars: dict[str, CVarEntry] = {}
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        value_type: ValueType,
        default_value: Any,
        flags: CVarFlags = CVarFlags.NONE,
        description: str | None = None,
    ) -> CVarEntry:
        """Register a CVar.

        Args:
            name: Unique, case-sensitive CVar name (e.g. "fps_max")
            value_type: Type every value of this CVar must have
            default_value: Initial value, must match value_type
            flags: Behaviour flags (CONFIDENTIAL hides the value in hints)
            description: Optional human description

        Returns:
            The new registry entry.

        Raises:
            DuplicateRegistrationError: If the name is already registered.
            TypeMismatchError: If default_value does not match value_type.
        """
        with self._lock:
            if name in self._cvars:
                raise DuplicateRegistrationError(name)

            value_type = as_value_type(value_type)
            default_value = check_value(value_type, default_value, name)

            entry = CVarEntry(
                name=name,
                value_type=value_type,
                default_value=default_value,
                value=default_value,
                flags=CVarFlags(flags),
                description=description,
            )
            self._cvars[name] = entry

        logger.debug(f"Registered CVar {name} ({value_type}) = {default_value!r}")
        return entry

    def register_def(self, defn: CVarDef) -> CVarEntry:
        """Register a CVar from its declarative definition."""
        return self.register(
            defn.name,
            defn.value_type,
            defn.default,
            flags=defn.flags,
            description=defn.description,
        )

    def register_defs(self, holder: Any) -> list[CVarEntry]:
        """Register every CVarDef found as an attribute of a class or module.

        Definitions are registered in name order.
        """
        defs = [
            value for value in vars(holder).values()
            if isinstance(value, CVarDef)
        ]
        return [self.register_def(d) for d in sorted(defs, key=lambda d: d.name)]

    def _entry(self, name: str) -> CVarEntry:
        # Caller holds the lock
        try:
            return self._cvars[name]
        except KeyError:
            raise NotRegisteredError(name) from None

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._cvars

    def get_type(self, name: str) -> ValueType:
        with self._lock:
            return self._entry(name).value_type

    def get_flags(self, name: str) -> CVarFlags:
        with self._lock:
            return self._entry(name).flags

    def get_description(self, name: str) -> str | None:
        with self._lock:
            return self._entry(name).description

    def get_value(self, name: str) -> Any:
        """Get the current value of a CVar as stored.

        Callers that expect a specific type should use get_value_as().
        """
        with self._lock:
            return self._entry(name).value

    def get_value_as(self, name: str, value_type: ValueType) -> Any:
        """Get the current value, asserting the caller's expected type.

        Raises:
            NotRegisteredError: If the name is not registered.
            TypeMismatchError: If the CVar was registered with another type.
        """
        with self._lock:
            entry = self._entry(name)
            if entry.value_type is not as_value_type(value_type):
                raise TypeMismatchError(name, value_type, entry.value)
            return entry.value

    def get_default(self, name: str) -> Any:
        with self._lock:
            return self._entry(name).default_value

    def set_value(self, name: str, value: Any) -> None:
        """Replace the current value of a CVar.

        Raises:
            NotRegisteredError: If the name is not registered.
            TypeMismatchError: If value does not match the CVar's type. The
                stored value is left unchanged.
        """
        with self._lock:
            entry = self._entry(name)
            entry.value = check_value(entry.value_type, value, name)
            stored = entry.value

        logger.debug(f"Set CVar {name} = {stored!r}")

    def reset_value(self, name: str) -> None:
        """Restore a CVar to its registration default."""
        with self._lock:
            entry = self._entry(name)
            entry.value = entry.default_value

        logger.debug(f"Reset CVar {name}")

    def get(self, defn: CVarDef) -> Any:
        """Typed read through a CVar definition."""
        return self.get_value_as(defn.name, defn.value_type)

    def set(self, defn: CVarDef, value: Any) -> None:
        """Typed write through a CVar definition."""
        self.set_value(defn.name, value)

    def list_names(self) -> list[str]:
        """Get all registered CVar names sorted lexicographically."""
        with self._lock:
            return sorted(self._cvars)

    def __contains__(self, name: str) -> bool:
        return self.is_registered(name)

    def __iter__(self) -> Iterator[CVarEntry]:
        with self._lock:
            entries = sorted(self._cvars.values(), key=lambda e: e.name)
        return iter(entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cvars)
