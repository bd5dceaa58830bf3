"""
Read-only view of the registry for inspector and listing surfaces.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cvar_console.core import CVarFlags, CVarRegistry, render_value


class CVarView(BaseModel):
    """Display row for one CVar."""
    name: str
    type: str
    value: str
    flags: list[str] = Field(default_factory=list)
    hidden: bool = False


def flag_names(flags: CVarFlags) -> list[str]:
    """Names of the individual bits set in flags."""
    return [f.name for f in CVarFlags if f is not CVarFlags.NONE and f in flags]


def snapshot(registry: CVarRegistry, placeholder: str) -> list[CVarView]:
    """Render every CVar for display, hiding CONFIDENTIAL values.

    Args:
        registry: Registry to read
        placeholder: Text shown instead of a confidential value

    Returns:
        One view per CVar, in name order.
    """
    views = []
    for entry in registry:
        hidden = entry.confidential
        views.append(CVarView(
            name=entry.name,
            type=entry.value_type.value,
            value=placeholder if hidden else render_value(entry.value_type, entry.value),
            flags=flag_names(entry.flags),
            hidden=hidden,
        ))
    return views


def format_table(views: list[CVarView]) -> str:
    """Format views as an aligned text table."""
    if not views:
        return ""
    name_w = max(len(v.name) for v in views)
    type_w = max(len(v.type) for v in views)
    lines = []
    for v in views:
        flags = f"  [{', '.join(v.flags)}]" if v.flags else ""
        lines.append(f"{v.name:<{name_w}}  {v.type:<{type_w}}  {v.value}{flags}")
    return "\n".join(lines)
