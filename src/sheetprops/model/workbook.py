from __future__ import annotations

from pydantic import BaseModel, Field

from ..errors import SheetNotFoundError
from ..options import MarginsOptions, SheetPropsOptions
from .nodes import Worksheet


class WorkbookModel(BaseModel):
    """In-memory workbook owning the layout records of each sheet."""

    sheets: dict[str, Worksheet] = Field(
        default_factory=dict, description="Worksheet records keyed by sheet name."
    )
    case_sensitive: bool = Field(
        default=False, description="Match sheet names case-sensitively."
    )

    @classmethod
    def from_sheet_names(
        cls, names: list[str], *, case_sensitive: bool = False
    ) -> WorkbookModel:
        """Build a workbook with one empty record per sheet name."""
        workbook = cls(case_sensitive=case_sensitive)
        for name in names:
            workbook.add_sheet(name)
        return workbook

    @property
    def sheet_names(self) -> list[str]:
        """Return sheet names in insertion order."""
        return list(self.sheets)

    def add_sheet(self, name: str) -> Worksheet:
        """Register a new empty sheet record.

        Raises:
            ValueError: If a sheet with the same name already exists.
        """
        candidate = name.strip()
        if not candidate:
            raise ValueError("Sheet name must not be empty.")
        if self._find_key(candidate) is not None:
            raise ValueError(f"Sheet already exists: {candidate!r}")
        record = Worksheet()
        self.sheets[candidate] = record
        return record

    def get_sheet_record(self, name: str) -> Worksheet:
        """Resolve a sheet record by name.

        Raises:
            SheetNotFoundError: If no sheet matches the name.
        """
        key = self._find_key(name)
        if key is None:
            raise SheetNotFoundError(name, self.sheet_names)
        return self.sheets[key]

    def set_margins(self, sheet: str, opts: MarginsOptions | None) -> None:
        from ..engine.service import set_margins

        set_margins(self, sheet, opts)

    def get_margins(self, sheet: str) -> MarginsOptions:
        from ..engine.service import get_margins

        return get_margins(self, sheet)

    def set_sheet_properties(self, sheet: str, opts: SheetPropsOptions | None) -> None:
        from ..engine.service import set_sheet_properties

        set_sheet_properties(self, sheet, opts)

    def get_sheet_properties(self, sheet: str) -> SheetPropsOptions:
        from ..engine.service import get_sheet_properties

        return get_sheet_properties(self, sheet)

    def _find_key(self, name: str) -> str | None:
        if name in self.sheets:
            return name
        if self.case_sensitive:
            return None
        folded = name.casefold()
        for key in self.sheets:
            if key.casefold() == folded:
                return key
        return None


__all__ = ["WorkbookModel"]
