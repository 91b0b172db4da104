from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
import pytest

from sheetprops.model.workbook import WorkbookModel


@pytest.fixture
def book() -> WorkbookModel:
    """Return a workbook model with two untouched sheets."""
    return WorkbookModel.from_sheet_names(["Sheet1", "Data"])


@pytest.fixture
def xlsx_path(tmp_path: Path) -> Path:
    """Create a minimal two-sheet workbook file.

    Args:
        tmp_path: Temporary directory fixture.
    """
    path = tmp_path / "book.xlsx"
    workbook = Workbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.title = "Sheet1"
    sheet["A1"] = "keep"
    workbook.create_sheet("Data")
    workbook.save(path)
    workbook.close()
    return path
