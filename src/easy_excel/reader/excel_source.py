"""Reader – ExcelSource (openpyxl)."""
from __future__ import annotations

import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from easy_excel.config.settings import ExportSettings
from easy_excel.kernel.errors import SourceReadError
from easy_excel.reader.source import RawSheet

__all__ = ["ExcelSource"]


class ExcelSource:
    """Reads the configured sheet (or the active one) of an ``.xlsx`` workbook."""

    def __init__(self, settings: ExportSettings | None = None) -> None:
        self._settings = settings or ExportSettings()

    def read(self, path: Path) -> RawSheet:
        try:
            wb = load_workbook(path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
            raise SourceReadError(str(path), cause=exc) from exc
        try:
            name = self._settings.sheet_name
            ws = wb[name] if name in wb.sheetnames else wb.active
            rows = iter(ws.iter_rows(values_only=True))
            first = next(rows, ())
            header = tuple("" if value is None else str(value) for value in first)
            body = tuple(tuple(row) for row in rows)
        finally:
            wb.close()
        return RawSheet(header=header, rows=body)
