"""Testing fakes – in-memory sink and source doubles."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from easy_excel.kernel.errors import SinkWriteError
from easy_excel.reader.source import RawSheet
from easy_excel.schema.grid import Grid

__all__ = ["InMemorySink", "InMemorySource"]


class InMemorySink:
    """Records every grid written to it.

    Set ``fail_with`` to make the next :meth:`write` raise
    :class:`SinkWriteError` with that exception as its cause.
    """

    def __init__(self) -> None:
        self.grids: list[Grid] = []
        self.fail_with: BaseException | None = None

    def write(self, grid: Grid) -> None:
        if self.fail_with is not None:
            raise SinkWriteError("memory", cause=self.fail_with)
        self.grids.append(grid)

    @property
    def last(self) -> Grid:
        if not self.grids:
            raise AssertionError("Nothing was written to the sink")
        return self.grids[-1]

    @property
    def header(self) -> tuple[str, ...]:
        return self.last.header

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self.last.rows

    @property
    def widths(self) -> tuple[int, ...]:
        return self.last.widths

    def __repr__(self) -> str:
        return f"InMemorySink(writes={len(self.grids)})"


class InMemorySource:
    """Serves a fixed header and rows regardless of the path asked for."""

    def __init__(self, header: Sequence[str], rows: Iterable[Sequence[Any]] = ()) -> None:
        self._sheet = RawSheet(header=tuple(header), rows=tuple(tuple(r) for r in rows))
        self.paths: list[Path] = []

    @classmethod
    def from_grid(cls, grid: Grid) -> "InMemorySource":
        return cls(grid.header, grid.rows)

    def read(self, path: Path) -> RawSheet:
        self.paths.append(path)
        return self._sheet
