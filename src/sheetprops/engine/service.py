from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from ..defaults import DEFAULT_ROW_HEIGHT, defaults_for
from ..model.nodes import SheetFormatPr, Worksheet
from ..options import MarginsOptions, SheetPropsOptions
from .allocator import ensure_path, find_path
from .base import SheetResolver
from .bindings import MARGINS_BINDINGS, SHEET_PROPS_BINDINGS, FieldBinding

logger = logging.getLogger(__name__)


def set_margins(
    workbook: SheetResolver, sheet: str, opts: MarginsOptions | None
) -> None:
    """Apply present margin and print-centering fields to a sheet.

    Args:
        workbook: Collaborator resolving the sheet record.
        sheet: Sheet name.
        opts: Sparse patch; ``None`` is a no-op.

    Raises:
        SheetNotFoundError: If the sheet does not exist.
    """
    record = workbook.get_sheet_record(sheet)
    if opts is None:
        return
    applied = _apply_bindings(record, opts, MARGINS_BINDINGS)
    logger.debug("Applied margins to %s: %s", sheet, applied)


def get_margins(workbook: SheetResolver, sheet: str) -> MarginsOptions:
    """Return the margin snapshot of a sheet with defaults for absent records.

    Raises:
        SheetNotFoundError: If the sheet does not exist.
    """
    record = workbook.get_sheet_record(sheet)
    snapshot = defaults_for("margins")
    _read_bindings(record, MARGINS_BINDINGS, snapshot)
    return MarginsOptions.model_validate(snapshot)


def set_sheet_properties(
    workbook: SheetResolver, sheet: str, opts: SheetPropsOptions | None
) -> None:
    """Apply present sheet property fields to a sheet.

    Any non-None patch also allocates the sheet format record (with the
    default row height) even when it sets no format field.

    Raises:
        SheetNotFoundError: If the sheet does not exist.
    """
    record = workbook.get_sheet_record(sheet)
    if opts is None:
        return
    if record.sheet_format_pr is None:
        record.sheet_format_pr = SheetFormatPr(default_row_height=DEFAULT_ROW_HEIGHT)
    applied = _apply_bindings(record, opts, SHEET_PROPS_BINDINGS)
    logger.debug("Applied sheet properties to %s: %s", sheet, applied)


def get_sheet_properties(workbook: SheetResolver, sheet: str) -> SheetPropsOptions:
    """Return the sheet property snapshot with defaults for absent records.

    Raises:
        SheetNotFoundError: If the sheet does not exist.
    """
    record = workbook.get_sheet_record(sheet)
    snapshot = defaults_for("sheet_props")
    _read_bindings(record, SHEET_PROPS_BINDINGS, snapshot)
    return SheetPropsOptions.model_validate(snapshot)


def _apply_bindings(
    record: Worksheet,
    opts: MarginsOptions | SheetPropsOptions,
    bindings: Sequence[FieldBinding],
) -> list[str]:
    """Write each present option field to its record, allocating records lazily."""
    applied: list[str] = []
    for binding in bindings:
        value = getattr(opts, binding.option_field)
        if value is None:
            continue
        node = ensure_path(record, binding.node_path)
        setattr(node, binding.model_field, value)
        applied.append(binding.option_field)
    return applied


def _read_bindings(
    record: Worksheet, bindings: Sequence[FieldBinding], snapshot: dict[str, Any]
) -> None:
    """Overwrite snapshot entries from every record that exists."""
    for binding in bindings:
        node = find_path(record, binding.node_path)
        if node is None:
            continue
        value = getattr(node, binding.model_field)
        if binding.unset_keeps_default and value is None:
            continue
        snapshot[binding.option_field] = value


__all__ = [
    "get_margins",
    "get_sheet_properties",
    "set_margins",
    "set_sheet_properties",
]
