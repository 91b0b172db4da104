from __future__ import annotations

from typing import Protocol

from ..model.nodes import Worksheet


class SheetResolver(Protocol):
    """Protocol for workbook collaborators that resolve sheet records by name."""

    def get_sheet_record(self, name: str) -> Worksheet:
        """Return the sheet record or raise ``SheetNotFoundError``."""


__all__ = ["SheetResolver"]
