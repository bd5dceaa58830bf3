"""
Built-in CVar definitions registered by the cvar-console CLI.
"""

from cvar_console.core import CVarDef, CVarFlags, ValueType


class CVars:
    """Definitions for the demo console session."""

    FPS_MAX = CVarDef(
        "fps_max", ValueType.INTEGER32, 60,
        flags=CVarFlags.ARCHIVE,
        description="Frame rate cap, 0 for unlimited",
    )
    VSYNC = CVarDef(
        "display.vsync", ValueType.BOOLEAN, True,
        flags=CVarFlags.ARCHIVE | CVarFlags.CLIENTONLY,
        description="Synchronize presentation with the display refresh",
    )
    UI_SCALE = CVarDef(
        "ui.scale", ValueType.FLOAT32, 1.0,
        flags=CVarFlags.ARCHIVE | CVarFlags.CLIENTONLY,
        description="Interface scale factor",
    )
    PLAYER_NAME = CVarDef(
        "player.name", ValueType.STRING, "Player",
        flags=CVarFlags.ARCHIVE,
        description="Display name",
    )
    NET_TICKRATE = CVarDef(
        "net.tickrate", ValueType.INTEGER32, 60,
        flags=CVarFlags.REPLICATED | CVarFlags.SERVER,
        description="Simulation ticks per second",
    )
    NET_PASSWORD = CVarDef(
        "net.password", ValueType.STRING, "",
        flags=CVarFlags.CONFIDENTIAL | CVarFlags.SERVERONLY,
        description="Password required to join",
    )
    SV_CHEATS = CVarDef(
        "sv_cheats", ValueType.BOOLEAN, False,
        flags=CVarFlags.REPLICATED | CVarFlags.SERVER,
        description="Allow CHEAT flagged CVars to change",
    )
