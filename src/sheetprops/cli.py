from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from .engine.service import (
    get_margins,
    get_sheet_properties,
    set_margins,
    set_sheet_properties,
)
from .errors import SheetNotFoundError
from .export import ExportRequest, export_workbook, load_workbook_model
from .options import MarginsOptions, SheetPropsOptions, coerce_options
from .shared.output_path import OnConflictPolicy

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SHEETPROPS_LOG_LEVEL"

PropertyGroup = Literal["margins", "props"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliConfig(BaseModel):
    """Configuration for one CLI invocation."""

    group: PropertyGroup = Field(..., description="Property group to patch.")
    xlsx_path: Path = Field(..., description="Source workbook.")
    sheet: str = Field(..., description="Target sheet name.")
    patch: str = Field(..., description="JSON object with the fields to set.")
    out_path: Path | None = Field(default=None, description="Output workbook path.")
    on_conflict: OnConflictPolicy = Field(
        default="overwrite", description="Output conflict policy."
    )
    log_level: LogLevel = Field(default="WARNING", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv: Optional CLI arguments for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    config = _parse_args(argv)
    _configure_logging(config)
    try:
        payload = run(config)
    except (SheetNotFoundError, ValueError, OSError) as exc:
        logger.error("sheetprops failed: %s", exc)
        return 1
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def run(config: CliConfig) -> dict[str, object]:
    """Apply the configured patch, export the workbook and return a summary."""
    model = load_workbook_model(config.xlsx_path)
    if config.group == "margins":
        margins = coerce_options(config.patch, MarginsOptions)
        set_margins(model, config.sheet, margins)
        snapshot = get_margins(model, config.sheet).to_payload()
    else:
        props = coerce_options(config.patch, SheetPropsOptions)
        set_sheet_properties(model, config.sheet, props)
        snapshot = get_sheet_properties(model, config.sheet).to_payload()
    result = export_workbook(
        model,
        ExportRequest(
            xlsx_path=config.xlsx_path,
            out_path=config.out_path,
            on_conflict=config.on_conflict,
        ),
    )
    for warning in result.warnings:
        logger.warning(warning)
    return {
        "out_path": result.out_path,
        "skipped": result.skipped,
        "sheet": config.sheet,
        config.group: snapshot,
    }


def _parse_args(argv: list[str] | None) -> CliConfig:
    """Parse CLI arguments into a config model."""
    parser = argparse.ArgumentParser(
        prog="sheetprops",
        description=(
            "Set worksheet page margins or sheet properties from a JSON patch. "
            "The printed snapshot merges the values already stored in the "
            "workbook with the patch."
        ),
    )
    parser.add_argument("group", choices=["margins", "props"], help="Property group.")
    parser.add_argument("xlsx_path", type=Path, help="Source workbook (.xlsx/.xlsm).")
    parser.add_argument("--sheet", required=True, help="Target sheet name.")
    parser.add_argument(
        "--patch",
        required=True,
        help='JSON object, e.g. \'{"left":1.0}\' or \'{"tabColorRGB":"FF0000"}\'.',
    )
    parser.add_argument("--out", type=Path, help="Output path.")
    parser.add_argument(
        "--on-conflict",
        choices=["overwrite", "skip", "rename"],
        default="overwrite",
        help="Output conflict policy (overwrite/skip/rename).",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Env: {LOG_LEVEL_ENV}.",
    )
    parser.add_argument("--log-file", type=Path, help="Optional log file path.")
    args = parser.parse_args(argv)
    try:
        return CliConfig(
            group=args.group,
            xlsx_path=args.xlsx_path,
            sheet=args.sheet,
            patch=args.patch,
            out_path=args.out,
            on_conflict=args.on_conflict,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def _configure_logging(config: CliConfig) -> None:
    """Configure logging for the CLI process."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level,
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

