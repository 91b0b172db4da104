from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Final

from pydantic import BaseModel

from ..model.nodes import (
    OutlinePr,
    PageMargins,
    PageSetUpPr,
    PrintOptions,
    SheetFormatPr,
    SheetPr,
    TabColor,
)

logger = logging.getLogger(__name__)

NodePath = tuple[str, ...]

NODE_FACTORIES: Final[dict[str, type[BaseModel]]] = {
    "page_margins": PageMargins,
    "print_options": PrintOptions,
    "sheet_pr": SheetPr,
    "outline_pr": OutlinePr,
    "page_set_up_pr": PageSetUpPr,
    "tab_color": TabColor,
    "sheet_format_pr": SheetFormatPr,
}


def ensure_node(parent: BaseModel, name: str) -> BaseModel:
    """Return the child record ``name`` of ``parent``, allocating it if absent.

    Args:
        parent: Record holding the optional child.
        name: Child attribute name; must be registered in ``NODE_FACTORIES``.

    Returns:
        Existing child, or a newly attached zero-valued record.
    """
    current = getattr(parent, name)
    if current is not None:
        return current
    factory = NODE_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown node kind: {name}")
    setattr(parent, name, factory())
    logger.debug("Allocated %s under %s.", name, type(parent).__name__)
    return getattr(parent, name)


def ensure_path(root: BaseModel, path: Sequence[str]) -> BaseModel:
    """Ensure every record along ``path`` exists and return the last one."""
    node = root
    for name in path:
        node = ensure_node(node, name)
    return node


def find_path(root: BaseModel, path: Sequence[str]) -> BaseModel | None:
    """Walk ``path`` without allocating; return None at the first missing record."""
    node: BaseModel | None = root
    for name in path:
        node = getattr(node, name)
        if node is None:
            return None
    return node


__all__ = ["NODE_FACTORIES", "NodePath", "ensure_node", "ensure_path", "find_path"]
