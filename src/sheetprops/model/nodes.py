from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Node(BaseModel):
    """Base for mutable worksheet records."""

    model_config = ConfigDict(validate_assignment=True)


class PageMargins(_Node):
    """Page margins in inches (``<pageMargins>``)."""

    left: float | None = None
    right: float | None = None
    top: float | None = None
    bottom: float | None = None
    header: float | None = None
    footer: float | None = None


class PrintOptions(_Node):
    """Print options (``<printOptions>``)."""

    horizontal_centered: bool = False
    vertical_centered: bool = False


class OutlinePr(_Node):
    """Outline summary placement (``<outlinePr>``)."""

    summary_below: bool | None = None
    summary_right: bool | None = None


class PageSetUpPr(_Node):
    """Page setup properties (``<pageSetUpPr>``)."""

    auto_page_breaks: bool = False
    fit_to_page: bool = False


class TabColor(_Node):
    """Sheet tab color (``<tabColor>``)."""

    indexed: int | None = None
    rgb: str | None = None
    theme: int | None = None
    tint: float | None = None


class SheetPr(_Node):
    """Sheet-level properties (``<sheetPr>``)."""

    code_name: str | None = None
    enable_format_conditions_calculation: bool | None = None
    published: bool | None = None
    outline_pr: OutlinePr | None = None
    page_set_up_pr: PageSetUpPr | None = None
    tab_color: TabColor | None = None


class SheetFormatPr(_Node):
    """Sheet format defaults (``<sheetFormatPr>``)."""

    base_col_width: int | None = None
    default_col_width: float = 0.0
    default_row_height: float = 0.0
    custom_height: bool = False
    zero_height: bool = False
    thick_top: bool = False
    thick_bottom: bool = False


class Worksheet(_Node):
    """Layout and metadata records of one worksheet.

    Every child is optional; ``None`` means the sheet has not been customized
    for that record yet.
    """

    page_margins: PageMargins | None = None
    print_options: PrintOptions | None = None
    sheet_pr: SheetPr | None = None
    sheet_format_pr: SheetFormatPr | None = None


__all__ = [
    "OutlinePr",
    "PageMargins",
    "PageSetUpPr",
    "PrintOptions",
    "SheetFormatPr",
    "SheetPr",
    "TabColor",
    "Worksheet",
]
