"""Export – ExcelExporter (openpyxl)."""
from __future__ import annotations

import io
import unicodedata

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from easy_excel.config.settings import ExportSettings
from easy_excel.schema.grid import Grid
from easy_excel.schema.resolver import AUTO_WIDTH

__all__ = ["ExcelExporter", "display_width"]

# Padding added to the widest cell when auto-sizing a column.
_AUTO_WIDTH_PADDING = 2


def display_width(text: str) -> int:
    """Approximate rendered width; wide (CJK) characters count twice."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


class ExcelExporter:
    """Exports a grid to a single-sheet ``.xlsx`` workbook."""

    def __init__(self, settings: ExportSettings | None = None) -> None:
        self._settings = settings or ExportSettings()

    def export(self, grid: Grid) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = self._settings.sheet_name

        header_font = Font(bold=True) if self._settings.bold_header else None
        for col_idx, title in enumerate(grid.header, start=1):
            cell = self._put(ws, 1, col_idx, title)
            if header_font is not None:
                cell.font = header_font

        for row_idx, row in enumerate(grid.rows, start=2):
            for col_idx, text in enumerate(row, start=1):
                self._put(ws, row_idx, col_idx, text)

        # Widths are applied once every cell is in place.
        for col_idx, width in enumerate(grid.widths, start=1):
            if width == AUTO_WIDTH:
                longest = max(display_width(text) for text in grid.column(col_idx - 1))
                width = min(longest + _AUTO_WIDTH_PADDING, self._settings.max_auto_width)
            ws.column_dimensions[get_column_letter(col_idx)].width = width

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    @staticmethod
    def _put(ws: Worksheet, row: int, column: int, text: str):  # noqa: ANN205
        cell = ws.cell(row=row, column=column)
        # Control characters are not allowed in sheet XML.
        cell.value = ILLEGAL_CHARACTERS_RE.sub("", text)
        # Text such as "=1+1" stays literal instead of becoming a formula.
        cell.data_type = "s"
        return cell
