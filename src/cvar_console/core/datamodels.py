"""
Data models for the CVar registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any


class ValueType(str, Enum):
    """Primitive value kinds a CVar can hold.

    The enum value doubles as the display name shown in completion hints
    and parse errors.
    """

    BOOLEAN = "Boolean"
    INTEGER32 = "Integer32"
    FLOAT32 = "Float32"
    STRING = "String"

    def __str__(self) -> str:
        return self.value


class CVarFlags(IntFlag):
    """Behaviour flags attached to a CVar.

    Only CONFIDENTIAL is interpreted here. The other bits are carried for
    the archive and replication layers.
    """

    NONE = 0
    ARCHIVE = 1
    CHEAT = 2
    SERVER = 4
    REPLICATED = 8
    NOT_CONNECTED = 16
    SERVERONLY = 32
    CLIENTONLY = 64
    CONFIDENTIAL = 128


@dataclass
class CVarEntry:
    """Registry entry for a single CVar."""

    name: str
    value_type: ValueType
    default_value: Any
    value: Any
    flags: CVarFlags = CVarFlags.NONE
    description: str | None = None

    @property
    def confidential(self) -> bool:
        return bool(self.flags & CVarFlags.CONFIDENTIAL)


@dataclass(frozen=True)
class CVarDef:
    """Declarative CVar definition.

    Definitions are collected on a holder class and registered in one go:

        class GameCVars:
            FPS_MAX = CVarDef("fps_max", ValueType.INTEGER32, 60)

        registry.register_defs(GameCVars)
        registry.get(GameCVars.FPS_MAX)
    """

    name: str
    value_type: ValueType
    default: Any
    flags: CVarFlags = CVarFlags.NONE
    description: str | None = None
