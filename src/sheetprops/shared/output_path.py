from __future__ import annotations

from pathlib import Path
from typing import Literal, NamedTuple

OnConflictPolicy = Literal["overwrite", "skip", "rename"]


def resolve_output_path(input_path: Path, *, out_path: Path | None) -> Path:
    """Return the export target, defaulting to ``<stem>_patched<suffix>`` beside the input."""
    if out_path is None:
        return (input_path.parent / patched_name(input_path)).resolve()
    if not out_path.suffix:
        out_path = out_path.with_name(f"{out_path.name}{input_path.suffix}")
    return out_path.resolve()


def patched_name(input_path: Path) -> str:
    """Build default patched output name without chaining `_patched` repeatedly."""
    stem = input_path.stem
    if stem.casefold().endswith("_patched"):
        return f"{stem}{input_path.suffix}"
    return f"{stem}_patched{input_path.suffix}"


class ConflictOutcome(NamedTuple):
    """Where to write, plus any warning and whether the write is skipped."""

    path: Path
    warning: str | None = None
    skipped: bool = False


def apply_conflict_policy(
    output_path: Path, on_conflict: OnConflictPolicy
) -> ConflictOutcome:
    """Decide where an export goes when ``output_path`` is already taken."""
    if on_conflict == "overwrite" or not output_path.exists():
        return ConflictOutcome(output_path)
    if on_conflict == "skip":
        return ConflictOutcome(
            output_path,
            f"Output exists; skipping write: {output_path.name}",
            skipped=True,
        )
    renamed = next_available_path(output_path)
    return ConflictOutcome(renamed, f"Output exists; renamed to: {renamed.name}")


def next_available_path(path: Path, *, max_attempts: int = 9_999) -> Path:
    """Return ``path`` or the first free ``<stem>_<n><suffix>`` sibling.

    Raises:
        RuntimeError: If every numbered candidate is taken.
    """
    if not path.exists():
        return path
    for index in range(1, max_attempts + 1):
        candidate = path.with_name(f"{path.stem}_{index}{path.suffix}")
        if not candidate.exists():
            return candidate
    raise RuntimeError(f"No free output name for {path} after {max_attempts} tries")
