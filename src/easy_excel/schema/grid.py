"""Schema – assemble the dense header/rows/widths grid handed to sinks."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping, Sequence

from easy_excel.schema.resolver import Column

__all__ = ["Grid", "assemble"]


@dataclasses.dataclass(frozen=True)
class Grid:
    """Rectangular export grid.

    ``header`` holds display titles (duplicates allowed), ``rows`` one tuple
    of cell strings per record and ``widths`` one width per column where
    ``0`` asks the sink to auto-size.
    """

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column(self, index: int) -> tuple[str, ...]:
        """Header plus every cell of column *index*."""
        return (self.header[index], *(row[index] for row in self.rows))


def assemble(schema: Sequence[Column], rows: Iterable[Mapping[str, str]]) -> Grid:
    """Place projected rows under *schema*; missing keys become ``""``."""
    keys = [column.title_key for column in schema]
    return Grid(
        header=tuple(column.title for column in schema),
        rows=tuple(tuple(row.get(key, "") for key in keys) for row in rows),
        widths=tuple(column.width for column in schema),
    )
