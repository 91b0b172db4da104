"""Correspondence tables between option descriptor fields and worksheet records.

Each option field maps to a field on one record of the worksheet tree. The
model field name is derived from the option field name by stripping the
group prefix (``tab_color_rgb`` -> ``rgb``), unless an alias overrides it.
Tables are built and checked once at import time.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from pydantic import BaseModel, Field

from ..options import MarginsOptions, SheetPropsOptions
from .allocator import NODE_FACTORIES, NodePath


class FieldGroupSpec(BaseModel):
    """Declaration of option fields that target one worksheet record."""

    group: str
    node_path: NodePath
    fields: tuple[str, ...]
    prefix: str = ""
    aliases: dict[str, str] = Field(default_factory=dict)
    # False: a stored None is reported as absent instead of the default.
    unset_keeps_default: bool = True


class FieldBinding(BaseModel):
    """Resolved link from one option field to one model field."""

    option_field: str
    node_path: NodePath
    model_field: str
    unset_keeps_default: bool


MARGINS_GROUPS: Final[tuple[FieldGroupSpec, ...]] = (
    FieldGroupSpec(
        group="page_margins",
        node_path=("page_margins",),
        fields=("left", "right", "top", "bottom", "header", "footer"),
    ),
    FieldGroupSpec(
        group="print_options",
        node_path=("print_options",),
        fields=("horizontally_centered", "vertically_centered"),
        aliases={
            "horizontally_centered": "horizontal_centered",
            "vertically_centered": "vertical_centered",
        },
    ),
)

SHEET_PROPS_GROUPS: Final[tuple[FieldGroupSpec, ...]] = (
    FieldGroupSpec(
        group="sheet_pr",
        node_path=("sheet_pr",),
        fields=("code_name", "enable_format_conditions_calculation", "published"),
    ),
    FieldGroupSpec(
        group="page_set_up_pr",
        node_path=("sheet_pr", "page_set_up_pr"),
        fields=("auto_page_breaks", "fit_to_page"),
    ),
    FieldGroupSpec(
        group="outline_pr",
        node_path=("sheet_pr", "outline_pr"),
        fields=("outline_summary_below", "outline_summary_right"),
        prefix="outline_",
        unset_keeps_default=False,
    ),
    FieldGroupSpec(
        group="tab_color",
        node_path=("sheet_pr", "tab_color"),
        fields=(
            "tab_color_indexed",
            "tab_color_rgb",
            "tab_color_theme",
            "tab_color_tint",
        ),
        prefix="tab_color_",
    ),
    FieldGroupSpec(
        group="sheet_format_pr",
        node_path=("sheet_format_pr",),
        fields=(
            "base_col_width",
            "default_col_width",
            "default_row_height",
            "custom_height",
            "zero_height",
            "thick_top",
            "thick_bottom",
        ),
    ),
)


def resolve_model_field(option_field: str, spec: FieldGroupSpec) -> str:
    """Return the model field name an option field writes to."""
    if option_field in spec.aliases:
        return spec.aliases[option_field]
    if spec.prefix and option_field.startswith(spec.prefix):
        return option_field[len(spec.prefix) :]
    return option_field


def build_bindings(spec: FieldGroupSpec) -> tuple[FieldBinding, ...]:
    """Resolve every field of a group against its target record class.

    Raises:
        ValueError: If the record kind is unknown or lacks a resolved field.
    """
    node_cls = NODE_FACTORIES.get(spec.node_path[-1])
    if node_cls is None:
        raise ValueError(f"{spec.group}: unknown node kind {spec.node_path[-1]!r}")
    bindings: list[FieldBinding] = []
    for option_field in spec.fields:
        model_field = resolve_model_field(option_field, spec)
        info = node_cls.model_fields.get(model_field)
        if info is None:
            raise ValueError(
                f"{spec.group}: {option_field!r} resolves to {model_field!r}, "
                f"which {node_cls.__name__} does not define"
            )
        bindings.append(
            FieldBinding(
                option_field=option_field,
                node_path=spec.node_path,
                model_field=model_field,
                unset_keeps_default=info.default is None and spec.unset_keeps_default,
            )
        )
    return tuple(bindings)


def build_table(
    groups: Iterable[FieldGroupSpec], options_cls: type[BaseModel]
) -> tuple[FieldBinding, ...]:
    """Build bindings for all groups and check they cover ``options_cls`` exactly once."""
    table = tuple(binding for spec in groups for binding in build_bindings(spec))
    bound = [binding.option_field for binding in table]
    duplicates = sorted({name for name in bound if bound.count(name) > 1})
    if duplicates:
        raise ValueError(f"{options_cls.__name__}: fields bound twice: {duplicates}")
    missing = sorted(set(options_cls.model_fields) - set(bound))
    if missing:
        raise ValueError(f"{options_cls.__name__}: unbound fields: {missing}")
    unknown = sorted(set(bound) - set(options_cls.model_fields))
    if unknown:
        raise ValueError(f"{options_cls.__name__}: unknown fields: {unknown}")
    return table


MARGINS_BINDINGS: Final = build_table(MARGINS_GROUPS, MarginsOptions)
SHEET_PROPS_BINDINGS: Final = build_table(SHEET_PROPS_GROUPS, SheetPropsOptions)


__all__ = [
    "MARGINS_BINDINGS",
    "MARGINS_GROUPS",
    "SHEET_PROPS_BINDINGS",
    "SHEET_PROPS_GROUPS",
    "FieldBinding",
    "FieldGroupSpec",
    "build_bindings",
    "build_table",
    "resolve_model_field",
]
