"""Sparse-patch accessors for worksheet page margins and sheet properties."""

from __future__ import annotations

from .defaults import DEFAULT_ROW_HEIGHT, MARGIN_DEFAULTS, SHEET_PROPS_DEFAULTS
from .engine import (
    SheetResolver,
    get_margins,
    get_sheet_properties,
    set_margins,
    set_sheet_properties,
)
from .errors import SheetNotFoundError
from .export import ExportRequest, ExportResult, export_workbook, load_workbook_model
from .model import WorkbookModel, Worksheet
from .options import MarginsOptions, SheetPropsOptions, coerce_options

__all__ = [
    "DEFAULT_ROW_HEIGHT",
    "MARGIN_DEFAULTS",
    "SHEET_PROPS_DEFAULTS",
    "ExportRequest",
    "ExportResult",
    "MarginsOptions",
    "SheetNotFoundError",
    "SheetPropsOptions",
    "SheetResolver",
    "WorkbookModel",
    "Worksheet",
    "coerce_options",
    "export_workbook",
    "get_margins",
    "get_sheet_properties",
    "load_workbook_model",
    "set_margins",
    "set_sheet_properties",
]
