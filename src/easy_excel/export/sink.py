"""Export – GridSink port and FileSink adapter."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from easy_excel.kernel.errors import SinkWriteError
from easy_excel.schema.grid import Grid

__all__ = ["FileSink", "GridExporter", "GridSink"]


@runtime_checkable
class GridSink(Protocol):
    """Port: receives the finished header, rows and width vector."""

    def write(self, grid: Grid) -> None: ...


class GridExporter(Protocol):
    """Port: serialises a grid into file content."""

    def export(self, grid: Grid) -> bytes: ...


class FileSink:
    """Write an exporter's output to *path*, creating parent directories."""

    def __init__(self, path: str | Path, exporter: GridExporter) -> None:
        self._path = Path(path)
        self._exporter = exporter

    @property
    def path(self) -> Path:
        return self._path

    def write(self, grid: Grid) -> None:
        content = self._exporter.export(grid)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(content)
        except OSError as exc:
            raise SinkWriteError(str(self._path), cause=exc) from exc

    def __repr__(self) -> str:
        return f"FileSink(path={str(self._path)!r}, exporter={type(self._exporter).__name__})"
