from __future__ import annotations

from .nodes import (
    OutlinePr,
    PageMargins,
    PageSetUpPr,
    PrintOptions,
    SheetFormatPr,
    SheetPr,
    TabColor,
    Worksheet,
)
from .workbook import WorkbookModel

__all__ = [
    "OutlinePr",
    "PageMargins",
    "PageSetUpPr",
    "PrintOptions",
    "SheetFormatPr",
    "SheetPr",
    "TabColor",
    "WorkbookModel",
    "Worksheet",
]
