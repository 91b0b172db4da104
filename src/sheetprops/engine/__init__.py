from __future__ import annotations

from .base import SheetResolver
from .service import get_margins, get_sheet_properties, set_margins, set_sheet_properties

__all__ = [
    "SheetResolver",
    "get_margins",
    "get_sheet_properties",
    "set_margins",
    "set_sheet_properties",
]
