"""Export – ExportService drives descriptors -> grid -> sink."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from easy_excel.config.settings import ExportSettings
from easy_excel.export.csv_export import CsvExporter
from easy_excel.export.excel_export import ExcelExporter
from easy_excel.export.sink import FileSink, GridExporter, GridSink
from easy_excel.kernel.errors import BaseError, UnsupportedShapeError
from easy_excel.observability.logging import get_logger
from easy_excel.schema.field import FieldDescriptor
from easy_excel.schema.grid import Grid, assemble
from easy_excel.schema.introspect import describe
from easy_excel.schema.projector import project_all
from easy_excel.schema.resolver import resolve

__all__ = ["ExportService", "format_for_path", "write_excel"]

_SUFFIX_FORMATS: dict[str, str] = {".xlsx": "xlsx", ".csv": "csv"}

logger = get_logger(__name__)


def format_for_path(path: str | Path) -> str:
    """Infer the export format from a file suffix."""
    suffix = Path(path).suffix.lower()
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported export format for suffix: {suffix!r}") from None


class ExportService:
    """Turns a record collection into a grid and hands it to a sink.

    The grid is assembled completely before the sink sees it, so a record
    that fails projection aborts the call without partial output.
    """

    def __init__(self, settings: ExportSettings | None = None) -> None:
        self._settings = settings or ExportSettings()

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    def exporter_for(self, format: str) -> GridExporter:  # noqa: A002
        if format == "xlsx":
            return ExcelExporter(self._settings)
        if format == "csv":
            return CsvExporter(delimiter=self._settings.csv_delimiter, bom=self._settings.csv_bom)
        raise ValueError(f"Unsupported export format: {format!r}")

    def build_grid(
        self,
        records: Iterable[Any],
        record_type: type | None = None,
        descriptors: Sequence[FieldDescriptor] | None = None,
    ) -> Grid:
        """Resolve the schema and project every record.

        Raises:
            UnsupportedShapeError: no descriptors were given and the record
                type is neither given nor inferable from a first record.
            MissingOptionalValueError: a record lacks an exported optional value.
        """
        items = list(records)
        if descriptors is None:
            descriptors = describe(_record_type_of(items, record_type))
        columns = resolve(descriptors)
        grid = assemble(columns, project_all(items, descriptors))
        logger.debug("grid_built", columns=grid.column_count, rows=grid.row_count)
        return grid

    def export(
        self,
        records: Iterable[Any],
        sink: GridSink,
        *,
        record_type: type | None = None,
        descriptors: Sequence[FieldDescriptor] | None = None,
    ) -> Grid:
        log = logger.bind(sink=repr(sink))
        try:
            grid = self.build_grid(records, record_type, descriptors)
            sink.write(grid)
        except BaseError as exc:
            log.warning("export_failed", error=exc)
            raise
        log.info("export_completed", columns=grid.column_count, rows=grid.row_count)
        return grid

    def write(
        self,
        records: Iterable[Any],
        path: str | Path,
        *,
        format: str | None = None,  # noqa: A002
        record_type: type | None = None,
        descriptors: Sequence[FieldDescriptor] | None = None,
    ) -> Path:
        """Export to a file; the format defaults to the path suffix."""
        exporter = self.exporter_for(format or format_for_path(path))
        sink = FileSink(path, exporter)
        self.export(records, sink, record_type=record_type, descriptors=descriptors)
        return sink.path


def _record_type_of(records: Sequence[Any], record_type: type | None) -> type:
    if record_type is not None:
        return record_type
    if not records:
        raise UnsupportedShapeError(
            None, "Cannot infer the record type of an empty collection; pass record_type"
        )
    return type(records[0])


def write_excel(
    records: Iterable[Any],
    path: str | Path,
    record_type: type | None = None,
    *,
    settings: ExportSettings | None = None,
) -> Path:
    """Write *records* to an ``.xlsx`` workbook at *path*."""
    return ExportService(settings).write(records, path, format="xlsx", record_type=record_type)
