"""Reader – CsvSource."""
from __future__ import annotations

import csv
from pathlib import Path

from easy_excel.kernel.errors import SourceReadError
from easy_excel.reader.source import RawSheet

__all__ = ["CsvSource"]


class CsvSource:
    """Reads a delimited text file; a leading UTF-8 BOM is ignored."""

    def __init__(self, delimiter: str = ",") -> None:
        self._delimiter = delimiter

    def read(self, path: Path) -> RawSheet:
        try:
            with open(path, encoding="utf-8-sig", newline="") as fh:
                rows = list(csv.reader(fh, delimiter=self._delimiter))
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise SourceReadError(str(path), cause=exc) from exc
        if not rows:
            return RawSheet(header=(), rows=())
        return RawSheet(header=tuple(rows[0]), rows=tuple(tuple(r) for r in rows[1:]))
