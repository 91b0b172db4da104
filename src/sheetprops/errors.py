from __future__ import annotations

from collections.abc import Sequence


class SheetNotFoundError(LookupError):
    """Raised when a sheet name does not resolve in the workbook."""

    def __init__(self, sheet: str, available: Sequence[str] = ()) -> None:
        self.sheet = sheet
        self.available = list(available)
        message = f"Sheet not found: {sheet!r}."
        if self.available:
            message += f" Available sheets: {', '.join(self.available)}"
        super().__init__(message)


__all__ = ["SheetNotFoundError"]
