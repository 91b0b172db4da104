from __future__ import annotations

import pytest

from sheetprops.defaults import DEFAULT_ROW_HEIGHT
from sheetprops.engine.service import (
    get_margins,
    get_sheet_properties,
    set_margins,
    set_sheet_properties,
)
from sheetprops.errors import SheetNotFoundError
from sheetprops.model.nodes import SheetFormatPr, TabColor
from sheetprops.model.workbook import WorkbookModel
from sheetprops.options import MarginsOptions, SheetPropsOptions


def test_get_margins_defaults_on_fresh_sheet(book: WorkbookModel) -> None:
    margins = get_margins(book, "Sheet1")
    assert margins.left == 0.7
    assert margins.right == 0.7
    assert margins.top == 0.75
    assert margins.bottom == 0.75
    assert margins.header == 0.3
    assert margins.footer == 0.3
    assert margins.horizontally_centered is None
    assert margins.vertically_centered is None


def test_get_sheet_properties_defaults_on_fresh_sheet(book: WorkbookModel) -> None:
    props = get_sheet_properties(book, "Sheet1")
    assert props.present_fields() == {
        "enable_format_conditions_calculation": True,
        "published": True,
        "auto_page_breaks": True,
        "outline_summary_below": True,
        "base_col_width": 8,
    }


def test_set_margins_keeps_untouched_defaults(book: WorkbookModel) -> None:
    set_margins(book, "Sheet1", MarginsOptions(left=1.0))
    margins = get_margins(book, "Sheet1")
    assert margins.left == 1.0
    assert margins.right == 0.7
    assert margins.horizontally_centered is None
    assert book.sheets["Sheet1"].print_options is None


def test_set_margins_left_only_reports_right_default_before_record_exists(
    book: WorkbookModel,
) -> None:
    assert get_margins(book, "Sheet1").right == 0.7
    set_margins(book, "Sheet1", MarginsOptions(horizontally_centered=True))
    margins = get_margins(book, "Sheet1")
    assert margins.right == 0.7
    assert margins.horizontally_centered is True
    assert margins.vertically_centered is False
    assert book.sheets["Sheet1"].page_margins is None


def test_set_margins_round_trip_all_fields(book: WorkbookModel) -> None:
    patch = MarginsOptions(
        left=0.1,
        right=0.2,
        top=0.3,
        bottom=0.4,
        header=0.5,
        footer=0.6,
        horizontally_centered=True,
        vertically_centered=False,
    )
    set_margins(book, "Sheet1", patch)
    assert get_margins(book, "Sheet1") == patch


def test_set_margins_zero_is_present(book: WorkbookModel) -> None:
    set_margins(book, "Sheet1", MarginsOptions(top=0.0))
    assert get_margins(book, "Sheet1").top == 0.0


def test_set_margins_none_patch_is_noop(book: WorkbookModel) -> None:
    before = get_margins(book, "Sheet1")
    set_margins(book, "Sheet1", None)
    set_margins(book, "Sheet1", MarginsOptions())
    assert get_margins(book, "Sheet1") == before
    assert book.sheets["Sheet1"].page_margins is None
    assert book.sheets["Sheet1"].print_options is None


def test_set_margins_unknown_sheet_raises(book: WorkbookModel) -> None:
    with pytest.raises(SheetNotFoundError, match="NoSuchSheet"):
        set_margins(book, "NoSuchSheet", MarginsOptions(left=1.0))


def test_unknown_sheet_raises_even_for_none_patch(book: WorkbookModel) -> None:
    with pytest.raises(SheetNotFoundError):
        set_margins(book, "NoSuchSheet", None)
    with pytest.raises(SheetNotFoundError):
        set_sheet_properties(book, "NoSuchSheet", None)


def test_get_operations_unknown_sheet_raise(book: WorkbookModel) -> None:
    with pytest.raises(SheetNotFoundError):
        get_margins(book, "NoSuchSheet")
    with pytest.raises(SheetNotFoundError):
        get_sheet_properties(book, "NoSuchSheet")


def test_set_margins_updates_existing_record_in_place(book: WorkbookModel) -> None:
    set_margins(book, "Sheet1", MarginsOptions(left=1.0, right=2.0))
    record = book.sheets["Sheet1"].page_margins
    set_margins(book, "Sheet1", MarginsOptions(left=3.0))
    assert book.sheets["Sheet1"].page_margins is record
    margins = get_margins(book, "Sheet1")
    assert margins.left == 3.0
    assert margins.right == 2.0


def test_set_sheet_properties_tab_color_rgb(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(tab_color_rgb="FF0000"))
    props = get_sheet_properties(book, "Sheet1")
    assert props.tab_color_rgb == "FF0000"
    assert props.tab_color_indexed is None
    assert props.code_name is None


def test_tab_color_patch_leaves_other_groups_untouched(book: WorkbookModel) -> None:
    set_sheet_properties(
        book,
        "Sheet1",
        SheetPropsOptions(
            code_name="Main",
            outline_summary_below=False,
            outline_summary_right=True,
            fit_to_page=True,
        ),
    )
    before = get_sheet_properties(book, "Sheet1")
    set_sheet_properties(
        book,
        "Sheet1",
        SheetPropsOptions(tab_color_theme=4, tab_color_tint=-0.25),
    )
    after = get_sheet_properties(book, "Sheet1")
    assert after.code_name == "Main"
    assert after.outline_summary_below is False
    assert after.outline_summary_right is True
    assert after.auto_page_breaks == before.auto_page_breaks
    assert after.fit_to_page is True
    assert after.tab_color_theme == 4
    assert after.tab_color_tint == -0.25


def test_tab_color_zero_tint_is_present(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(tab_color_tint=0.0))
    assert get_sheet_properties(book, "Sheet1").tab_color_tint == 0.0
    tab_color = book.sheets["Sheet1"].sheet_pr.tab_color  # type: ignore[union-attr]
    assert tab_color == TabColor(tint=0.0)


def test_set_sheet_properties_round_trip_all_fields(book: WorkbookModel) -> None:
    patch = SheetPropsOptions(
        code_name="Report",
        enable_format_conditions_calculation=False,
        published=False,
        auto_page_breaks=False,
        fit_to_page=True,
        outline_summary_below=False,
        outline_summary_right=False,
        tab_color_indexed=10,
        tab_color_rgb="FF00FF00",
        tab_color_theme=2,
        tab_color_tint=0.5,
        base_col_width=10,
        default_col_width=12.5,
        default_row_height=20.0,
        custom_height=True,
        zero_height=False,
        thick_top=True,
        thick_bottom=True,
    )
    set_sheet_properties(book, "Sheet1", patch)
    assert get_sheet_properties(book, "Sheet1") == patch


def test_set_sheet_properties_allocates_format_record(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions())
    record = book.sheets["Sheet1"]
    assert record.sheet_format_pr == SheetFormatPr(default_row_height=DEFAULT_ROW_HEIGHT)
    assert record.sheet_pr is None
    props = get_sheet_properties(book, "Sheet1")
    assert props.default_row_height == DEFAULT_ROW_HEIGHT
    assert props.base_col_width == 8
    assert props.custom_height is False


def test_set_sheet_properties_none_patch_is_noop(book: WorkbookModel) -> None:
    before = get_sheet_properties(book, "Sheet1")
    set_sheet_properties(book, "Sheet1", None)
    assert get_sheet_properties(book, "Sheet1") == before
    assert book.sheets["Sheet1"].sheet_format_pr is None


def test_empty_patch_is_noop_once_format_record_exists(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(published=False))
    before = get_sheet_properties(book, "Sheet1")
    set_sheet_properties(book, "Sheet1", SheetPropsOptions())
    assert get_sheet_properties(book, "Sheet1") == before


def test_format_record_keeps_existing_row_height(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(default_row_height=30.0))
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(code_name="X"))
    assert get_sheet_properties(book, "Sheet1").default_row_height == 30.0


def test_page_setup_record_reports_plain_values(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(fit_to_page=True))
    props = get_sheet_properties(book, "Sheet1")
    assert props.fit_to_page is True
    assert props.auto_page_breaks is False


def test_outline_record_reports_unset_field_as_absent(book: WorkbookModel) -> None:
    assert get_sheet_properties(book, "Sheet1").outline_summary_below is True
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(outline_summary_right=True))
    props = get_sheet_properties(book, "Sheet1")
    assert props.outline_summary_right is True
    assert props.outline_summary_below is None


def test_sheet_pr_unset_flags_keep_defaults(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(code_name="Main"))
    props = get_sheet_properties(book, "Sheet1")
    assert props.enable_format_conditions_calculation is True
    assert props.published is True


def test_empty_code_name_is_present(book: WorkbookModel) -> None:
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(code_name=""))
    assert get_sheet_properties(book, "Sheet1").code_name == ""


def test_sheets_are_independent(book: WorkbookModel) -> None:
    set_margins(book, "Sheet1", MarginsOptions(left=2.0))
    set_sheet_properties(book, "Sheet1", SheetPropsOptions(code_name="One"))
    assert get_margins(book, "Data").left == 0.7
    assert get_sheet_properties(book, "Data").code_name is None
    assert book.sheets["Data"].sheet_format_pr is None
