"""
Spreadsheet export for difference records.

The workbook holds one sheet with exactly four columns, in this order:

    Field | Value | ComparedField | ComparedValue

Value and ComparedValue hold the compact JSON text of the node, so nested
objects and arrays stay legible. The header row is bold on a grey fill;
data rows use a white fill.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from .core.types import DifferenceRecord
from .errors import ExportError

logger = logging.getLogger(__name__)

HEADERS = ("Field", "Value", "ComparedField", "ComparedValue")

_INVALID_SHEET_CHARS = set("[]:*?/\\")
_MAX_COLUMN_WIDTH = 60


@dataclass(frozen=True)
class ExportOptions:
    """
    Workbook layout settings.

    Attributes:
        sheet_name: Title of the single worksheet
        header_fill: RGB hex fill of the header row
        value_fill: RGB hex fill of the data rows
        missing_text: Cell text for a side where the key/index is absent
        extension: Extension of the derived output file name
    """

    sheet_name: str = "Differences"
    header_fill: str = "EFEFEF"
    value_fill: str = "FFFFFF"
    missing_text: str = "<missing>"
    extension: str = ".xlsx"

    def __post_init__(self):
        """Reject sheet titles the spreadsheet format does not allow."""
        if not self.sheet_name or len(self.sheet_name) > 31:
            raise ValueError("sheet_name must be 1-31 characters")
        if _INVALID_SHEET_CHARS & set(self.sheet_name):
            chars = "".join(sorted(_INVALID_SHEET_CHARS))
            raise ValueError(f"sheet_name contains one of {chars}")


def create_default_options() -> ExportOptions:
    """Default layout: "Differences" sheet, grey header, white rows."""
    return ExportOptions()


def output_path_for(
    file2: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    extension: str = ".xlsx",
) -> Path:
    """
    Derive the export path from the second input's base name.

    ``data/new.json`` becomes ``new.xlsx`` in ``output_dir`` (the current
    directory when not given).
    """
    name = Path(file2).stem + extension
    return Path(output_dir or ".") / name


def build_workbook(
    records: Iterable[DifferenceRecord],
    options: Optional[ExportOptions] = None,
) -> Workbook:
    """Build the styled difference workbook in memory."""
    options = options or create_default_options()

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = options.sheet_name

    header_font = Font(bold=True)
    header_fill = _solid_fill(options.header_fill)
    value_fill = _solid_fill(options.value_fill)
    widths = [len(h) for h in HEADERS]

    for col, header in enumerate(HEADERS, start=1):
        cell = sheet.cell(row=1, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill

    row = 1
    for row, record in enumerate(records, start=2):
        for col, text in enumerate(record.to_row(options.missing_text), start=1):
            cell = sheet.cell(row=row, column=col)
            cleaned = ILLEGAL_CHARACTERS_RE.sub("", text)
            if cleaned != text:
                logger.debug(
                    "Stripped control characters from %s%d: %r",
                    get_column_letter(col),
                    row,
                    text,
                )
            cell.value = cleaned
            # Paths and values are text, never formulas.
            cell.data_type = "s"
            cell.fill = value_fill
            widths[col - 1] = max(widths[col - 1], len(cell.value))

    for col, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(col)].width = min(
            width + 2, _MAX_COLUMN_WIDTH
        )
    sheet.freeze_panes = "A2"

    logger.debug("Built workbook with %d data row(s)", row - 1)
    return workbook


def write_workbook(
    records: Iterable[DifferenceRecord],
    path: Union[str, Path],
    options: Optional[ExportOptions] = None,
) -> Path:
    """
    Build and save the workbook.

    Returns:
        The path written

    Raises:
        ExportError: the file could not be written
    """
    workbook = build_workbook(records, options)
    out = Path(path)
    try:
        workbook.save(out)
    except OSError as e:
        raise ExportError(out, str(e)) from e
    logger.info("Wrote %s", out)
    return out


def _solid_fill(rgb: str) -> PatternFill:
    return PatternFill(fill_type="solid", start_color=rgb, end_color=rgb)
