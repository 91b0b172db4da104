from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final

# Row height written when the sheet format record is first allocated.
DEFAULT_ROW_HEIGHT: Final[float] = 15.0

# Values reported by get_margins when the sheet has no margin record.
MARGIN_DEFAULTS: Final = MappingProxyType(
    {
        "left": 0.7,
        "right": 0.7,
        "top": 0.75,
        "bottom": 0.75,
        "header": 0.3,
        "footer": 0.3,
    }
)

SHEET_PROPS_DEFAULTS: Final = MappingProxyType(
    {
        "enable_format_conditions_calculation": True,
        "published": True,
        "auto_page_breaks": True,
        "outline_summary_below": True,
        "base_col_width": 8,
    }
)


def defaults_for(group: str) -> dict[str, Any]:
    """Return a fresh copy of the default table for a descriptor group."""
    if group == "margins":
        return dict(MARGIN_DEFAULTS)
    if group == "sheet_props":
        return dict(SHEET_PROPS_DEFAULTS)
    raise ValueError(f"Unknown descriptor group: {group}")


__all__ = [
    "DEFAULT_ROW_HEIGHT",
    "MARGIN_DEFAULTS",
    "SHEET_PROPS_DEFAULTS",
    "defaults_for",
]
