from __future__ import annotations

from .output_path import (
    ConflictOutcome,
    OnConflictPolicy,
    apply_conflict_policy,
    next_available_path,
    patched_name,
    resolve_output_path,
)

__all__ = [
    "ConflictOutcome",
    "OnConflictPolicy",
    "apply_conflict_policy",
    "next_available_path",
    "patched_name",
    "resolve_output_path",
]
