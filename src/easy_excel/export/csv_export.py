"""Export – CsvExporter."""
from __future__ import annotations

import csv
import io

from easy_excel.schema.grid import Grid

__all__ = ["CsvExporter"]


class CsvExporter:
    """Serialises a grid as CSV; column widths have no CSV equivalent and are dropped."""

    def __init__(
        self,
        delimiter: str = ",",
        quoting: int = csv.QUOTE_MINIMAL,
        *,
        bom: bool = False,
    ) -> None:
        self._delimiter = delimiter
        self._quoting = quoting
        self._bom = bom

    def export(self, grid: Grid) -> bytes:
        """Return the complete CSV content as bytes (UTF-8, optional BOM)."""
        buf = io.StringIO(newline="")
        if self._bom:
            buf.write("\ufeff")  # BOM for Excel compatibility

        writer = csv.writer(buf, delimiter=self._delimiter, quoting=self._quoting)
        writer.writerow(grid.header)
        writer.writerows(grid.rows)

        return buf.getvalue().encode("utf-8")
