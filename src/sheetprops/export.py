from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any, Final, TypeVar

from openpyxl.styles.colors import Color
from openpyxl.worksheet.properties import Outline, PageSetupProperties
from pydantic import BaseModel, Field

from .core.workbook import (
    ensure_supported_extension,
    ensure_workbook_file,
    openpyxl_workbook,
)
from .model.nodes import (
    OutlinePr,
    PageMargins,
    PageSetUpPr,
    PrintOptions,
    SheetFormatPr,
    SheetPr,
    TabColor,
    Worksheet,
)
from .model.workbook import WorkbookModel
from .shared.output_path import (
    OnConflictPolicy,
    apply_conflict_policy,
    resolve_output_path,
)

logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT", bound=BaseModel)

# Record field -> openpyxl attribute, per record.
_MARGIN_ATTRS: Final = {
    side: side for side in ("left", "right", "top", "bottom", "header", "footer")
}
_PRINT_OPTION_ATTRS: Final = {
    "horizontal_centered": "horizontalCentered",
    "vertical_centered": "verticalCentered",
}
_SHEET_PR_ATTRS: Final = {
    "code_name": "codeName",
    "enable_format_conditions_calculation": "enableFormatConditionsCalculation",
    "published": "published",
}
_OUTLINE_ATTRS: Final = {"summary_below": "summaryBelow", "summary_right": "summaryRight"}
_PAGE_SETUP_ATTRS: Final = {
    "auto_page_breaks": "autoPageBreaks",
    "fit_to_page": "fitToPage",
}
_SHEET_FORMAT_ATTRS: Final = {
    "base_col_width": "baseColWidth",
    "default_col_width": "defaultColWidth",
    "default_row_height": "defaultRowHeight",
    "custom_height": "customHeight",
    "zero_height": "zeroHeight",
    "thick_top": "thickTop",
    "thick_bottom": "thickBottom",
}
_SHEET_FORMAT_FLAGS: Final = ("custom_height", "zero_height", "thick_top", "thick_bottom")


class ExportRequest(BaseModel):
    """Input model for writing patched records back into a workbook file."""

    xlsx_path: Path = Field(..., description="Source workbook to overlay.")
    out_path: Path | None = Field(
        default=None, description="Output path; defaults to <stem>_patched.xlsx."
    )
    on_conflict: OnConflictPolicy = Field(
        default="overwrite", description="Output conflict policy."
    )


class ExportResult(BaseModel):
    """Output model for workbook export."""

    out_path: str
    sheets_written: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    skipped: bool = False


def load_workbook_model(path: Path, *, case_sensitive: bool = False) -> WorkbookModel:
    """Read every worksheet of ``path`` and its current records into a model.

    Loaded values are not marked as set, so exporting the model writes back
    only what was patched afterwards.

    Raises:
        FileNotFoundError: If the workbook does not exist.
        ValueError: If the extension is unsupported.
    """
    ensure_workbook_file(path)
    model = WorkbookModel(case_sensitive=case_sensitive)
    with openpyxl_workbook(path, read_only=False) as wb:
        for ws in wb.worksheets:
            record = model.add_sheet(ws.title)
            record.page_margins = _read_page_margins(ws)
            record.print_options = _read_print_options(ws)
            record.sheet_pr = _read_sheet_pr(ws)
            record.sheet_format_pr = _read_sheet_format(ws)
    logger.debug("Loaded %d sheet(s) from %s", len(model.sheets), path)
    return model


def export_workbook(model: WorkbookModel, request: ExportRequest) -> ExportResult:
    """Write every field set on ``model`` onto the source workbook and save.

    Fields that were loaded from the file or never set leave the source
    workbook untouched.

    Raises:
        FileNotFoundError: If the source workbook does not exist.
        ValueError: If the source or output extension is unsupported.
    """
    source = request.xlsx_path
    ensure_workbook_file(source)
    output_path = resolve_output_path(source, out_path=request.out_path)
    ensure_supported_extension(output_path)
    output_path, warning, skipped = apply_conflict_policy(
        output_path, request.on_conflict
    )
    warnings: list[str] = [warning] if warning else []
    if skipped:
        logger.info("Export skipped: %s", output_path)
        return ExportResult(out_path=str(output_path), warnings=warnings, skipped=True)

    written: list[str] = []
    with openpyxl_workbook(source, read_only=False) as wb:
        for name, record in model.sheets.items():
            if not _record_changed(record):
                continue
            if name not in wb.sheetnames:
                wb.create_sheet(name)
                warnings.append(f"Sheet {name!r} was missing from the source; created.")
            warnings.extend(_write_worksheet(wb[name], record))
            written.append(name)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
    logger.info("Exported %d sheet(s) to %s", len(written), output_path)
    return ExportResult(
        out_path=str(output_path), sheets_written=written, warnings=warnings
    )


def _unchanged(node_cls: type[NodeT], **values: Any) -> NodeT:
    """Build a record from file values without marking any field as set."""
    return node_cls.model_construct(_fields_set=set(), **values)


def _read_attrs(source: Any, attrs: Mapping[str, str]) -> dict[str, Any]:
    return {field: getattr(source, attr) for field, attr in attrs.items()}


def _read_page_margins(ws: Any) -> PageMargins | None:
    if ws.page_margins is None:
        return None
    return _unchanged(PageMargins, **_read_attrs(ws.page_margins, _MARGIN_ATTRS))


def _read_print_options(ws: Any) -> PrintOptions | None:
    options = ws.print_options
    if options is None:
        return None
    values = _read_attrs(options, _PRINT_OPTION_ATTRS)
    if all(value is None for value in values.values()):
        return None
    return _unchanged(
        PrintOptions, **{field: bool(value) for field, value in values.items()}
    )


def _read_sheet_pr(ws: Any) -> SheetPr | None:
    props = ws.sheet_properties
    if props is None:
        return None
    values = _read_attrs(props, _SHEET_PR_ATTRS)
    if props.outlinePr is not None:
        values["outline_pr"] = _unchanged(
            OutlinePr, **_read_attrs(props.outlinePr, _OUTLINE_ATTRS)
        )
    page_setup = props.pageSetUpPr
    if page_setup is not None and (
        page_setup.autoPageBreaks is not None or page_setup.fitToPage is not None
    ):
        # omitted attributes take their schema defaults
        values["page_set_up_pr"] = _unchanged(
            PageSetUpPr,
            auto_page_breaks=page_setup.autoPageBreaks is not False,
            fit_to_page=bool(page_setup.fitToPage),
        )
    if props.tabColor is not None:
        values["tab_color"] = _read_tab_color(props.tabColor)
    return _unchanged(SheetPr, **values)


def _read_tab_color(color: Color) -> TabColor:
    kind = color.type
    return _unchanged(
        TabColor,
        rgb=color.rgb if kind == "rgb" else None,
        theme=color.theme if kind == "theme" else None,
        indexed=color.indexed if kind == "indexed" else None,
        tint=color.tint,
    )


def _read_sheet_format(ws: Any) -> SheetFormatPr | None:
    fmt = ws.sheet_format
    if fmt is None:
        return None
    values = _read_attrs(fmt, _SHEET_FORMAT_ATTRS)
    values["default_col_width"] = values["default_col_width"] or 0.0
    values["default_row_height"] = values["default_row_height"] or 0.0
    for flag in _SHEET_FORMAT_FLAGS:
        values[flag] = bool(values[flag])
    return _unchanged(SheetFormatPr, **values)


def _record_changed(record: Worksheet) -> bool:
    return any(_is_changed(getattr(record, name)) for name in Worksheet.model_fields)


def _is_changed(node: BaseModel | None) -> bool:
    """Return True if any field of ``node`` or its child records was set."""
    if node is None:
        return False
    if node.model_fields_set:
        return True
    return any(
        _is_changed(value)
        for value in (getattr(node, name) for name in type(node).model_fields)
        if isinstance(value, BaseModel)
    )


def _copy_set_fields(node: BaseModel, target: Any, attrs: Mapping[str, str]) -> None:
    """Copy the fields set on ``node`` onto the matching openpyxl attributes."""
    for field, attr in attrs.items():
        if field not in node.model_fields_set:
            continue
        value = getattr(node, field)
        setattr(target, attr, None if value == "" else value)


def _write_worksheet(ws: Any, record: Worksheet) -> list[str]:
    """Copy changed records onto an openpyxl worksheet; return warnings."""
    warnings: list[str] = []
    if record.page_margins is not None:
        _copy_set_fields(record.page_margins, ws.page_margins, _MARGIN_ATTRS)
    if record.print_options is not None:
        _copy_set_fields(record.print_options, ws.print_options, _PRINT_OPTION_ATTRS)
    if record.sheet_pr is not None:
        warnings.extend(_write_sheet_pr(ws, record.sheet_pr))
    if record.sheet_format_pr is not None:
        _copy_set_fields(record.sheet_format_pr, ws.sheet_format, _SHEET_FORMAT_ATTRS)
    return warnings


def _write_sheet_pr(ws: Any, node: SheetPr) -> list[str]:
    warnings: list[str] = []
    props = ws.sheet_properties
    _copy_set_fields(node, props, _SHEET_PR_ATTRS)
    if node.page_set_up_pr is not None and _is_changed(node.page_set_up_pr):
        if props.pageSetUpPr is None:
            props.pageSetUpPr = PageSetupProperties()
        _copy_set_fields(node.page_set_up_pr, props.pageSetUpPr, _PAGE_SETUP_ATTRS)
    if node.outline_pr is not None and _is_changed(node.outline_pr):
        if props.outlinePr is None:
            props.outlinePr = Outline()
        _copy_set_fields(node.outline_pr, props.outlinePr, _OUTLINE_ATTRS)
    if node.tab_color is not None and _is_changed(node.tab_color):
        color = _build_tab_color(node.tab_color)
        if color is None:
            warnings.append(
                f"Tab color of {ws.title!r} has no rgb/theme/indexed value; not written."
            )
        else:
            props.tabColor = color
    return warnings


def _build_tab_color(node: TabColor) -> Color | None:
    """Build an openpyxl color; rgb wins over theme, theme over indexed."""
    tint = node.tint or 0.0
    if node.rgb:
        return Color(rgb=node.rgb.lstrip("#").upper(), tint=tint)
    if node.theme is not None:
        return Color(theme=node.theme, tint=tint)
    if node.indexed is not None:
        return Color(indexed=node.indexed, tint=tint)
    return None


__all__ = ["ExportRequest", "ExportResult", "export_workbook", "load_workbook_model"]
