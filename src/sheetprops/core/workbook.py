from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
import warnings

from openpyxl import load_workbook

SUPPORTED_EXTENSIONS = {".xlsx", ".xlsm"}


@contextmanager
def openpyxl_workbook(file_path: Path, *, read_only: bool) -> Iterator[Any]:
    """Open an openpyxl workbook and ensure it is closed.

    Args:
        file_path: Workbook path.
        read_only: Whether to open in read-only mode.

    Yields:
        openpyxl workbook instance.
    """
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore",
            message="Unknown extension is not supported and will be removed",
            category=UserWarning,
            module="openpyxl",
        )
        warnings.filterwarnings(
            "ignore",
            message="Cannot parse header or footer so it will be ignored",
            category=UserWarning,
            module="openpyxl",
        )
        wb = load_workbook(
            file_path,
            read_only=read_only,
            keep_vba=file_path.suffix.lower() == ".xlsm",
        )
    try:
        yield wb
    finally:
        wb.close()


def ensure_supported_extension(path: Path) -> None:
    """Validate that openpyxl can round-trip the workbook format.

    Raises:
        ValueError: If the extension is not .xlsx/.xlsm.
    """
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported workbook extension: {path.suffix or '<none>'}. "
            "Use .xlsx or .xlsm."
        )


def ensure_workbook_file(file_path: Path) -> None:
    """Validate that a source workbook exists and has a supported format.

    Raises:
        FileNotFoundError: If the workbook does not exist.
        ValueError: If the extension is unsupported.
    """
    ensure_supported_extension(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Workbook not found: {file_path}")
