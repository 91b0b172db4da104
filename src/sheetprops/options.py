from __future__ import annotations

import json
from typing import Any, TypeVar, cast

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TOptions = TypeVar("TOptions", bound="_Options")


class _Options(BaseModel):
    """Base for sparse option descriptors; ``None`` means the field is absent."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def present_fields(self) -> dict[str, Any]:
        """Return present fields keyed by Python field name."""
        return {
            name: value
            for name in type(self).model_fields
            if (value := getattr(self, name)) is not None
        }

    def to_payload(self) -> dict[str, Any]:
        """Serialize present fields using camelCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


class MarginsOptions(_Options):
    """Page margins and print centering of a worksheet."""

    left: float | None = None
    right: float | None = None
    top: float | None = None
    bottom: float | None = None
    header: float | None = None
    footer: float | None = None
    horizontally_centered: bool | None = None
    vertically_centered: bool | None = None


class SheetPropsOptions(_Options):
    """Worksheet properties: identity, page setup, outline, tab color and format."""

    code_name: str | None = None
    enable_format_conditions_calculation: bool | None = None
    published: bool | None = None
    auto_page_breaks: bool | None = None
    fit_to_page: bool | None = None
    outline_summary_below: bool | None = None
    outline_summary_right: bool | None = None
    tab_color_indexed: int | None = None
    tab_color_rgb: str | None = Field(default=None, alias="tabColorRGB")
    tab_color_theme: int | None = None
    tab_color_tint: float | None = None
    base_col_width: int | None = None
    default_col_width: float | None = None
    default_row_height: float | None = None
    custom_height: bool | None = None
    zero_height: bool | None = None
    thick_top: bool | None = None
    thick_bottom: bool | None = None


def coerce_options(
    data: TOptions | dict[str, Any] | str | None, model_cls: type[TOptions]
) -> TOptions | None:
    """Normalize a patch payload (model, dict or JSON text) into an options model.

    Raises:
        ValueError: If JSON text is empty, malformed or not an object.
        pydantic.ValidationError: If fields are unknown or mistyped.
    """
    if data is None or isinstance(data, model_cls):
        return data
    if isinstance(data, str):
        data = parse_options_json(data, model_cls=model_cls)
    return model_cls.model_validate(data)


def parse_options_json(raw: str, *, model_cls: type[BaseModel]) -> dict[str, Any]:
    """Parse a JSON string patch into object form."""
    text = raw.strip()
    if not text:
        raise ValueError(build_options_error_message(model_cls, "empty string"))
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(build_options_error_message(model_cls, "invalid JSON")) from exc
    if not isinstance(parsed, dict):
        raise ValueError(
            build_options_error_message(model_cls, "JSON value must be an object")
        )
    return cast(dict[str, Any], parsed)


def build_options_error_message(model_cls: type[BaseModel], reason: str) -> str:
    """Build a consistent validation message for invalid patch payloads."""
    example = (
        '{"left":1.0,"horizontallyCentered":true}'
        if model_cls is MarginsOptions
        else '{"tabColorRGB":"FF0000","outlineSummaryBelow":false}'
    )
    return (
        f"Invalid {model_cls.__name__} payload: {reason}. "
        f"Use object form like {example}."
    )


__all__ = [
    "MarginsOptions",
    "SheetPropsOptions",
    "build_options_error_message",
    "coerce_options",
    "parse_options_json",
]
