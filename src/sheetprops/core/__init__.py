from __future__ import annotations

from .workbook import ensure_supported_extension, ensure_workbook_file, openpyxl_workbook

__all__ = ["ensure_supported_extension", "ensure_workbook_file", "openpyxl_workbook"]
