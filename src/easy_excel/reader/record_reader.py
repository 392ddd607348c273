"""Reader – ExcelReader turns sheet rows back into records."""
from __future__ import annotations

from collections import defaultdict, deque
from pathlib import Path
from typing import Any, Callable, Generic, Sequence, TypeVar

from easy_excel.config.settings import ExportSettings
from easy_excel.kernel.errors import RowDecodeError, SourceReadError, UnsupportedShapeError
from easy_excel.kernel.types import Nothing, Some
from easy_excel.observability.logging import get_logger
from easy_excel.reader.csv_source import CsvSource
from easy_excel.reader.excel_source import ExcelSource
from easy_excel.reader.source import GridSource, RawSheet
from easy_excel.schema.coerce import is_blank, parse_cell
from easy_excel.schema.field import FieldDescriptor
from easy_excel.schema.introspect import describe
from easy_excel.schema.resolver import Column, exportable, resolve

__all__ = ["ExcelReader", "read_excel"]

T = TypeVar("T")

logger = get_logger(__name__)

# Marker: leave the field to the record's own default.
_OMIT: Any = object()

# First data row in spreadsheet numbering (row 1 is the header).
_FIRST_DATA_ROW = 2


class ExcelReader(Generic[T]):
    """Reads records written by :class:`~easy_excel.export.ExportService`.

    Columns are located by display title. When several columns share a
    title they are consumed left to right in schema order. Fields that are
    not exported (untitled or nested lists) and plain fields with blank
    cells are left to the record's defaults.
    """

    def __init__(
        self,
        record_type: type[T] | None = None,
        *,
        descriptors: Sequence[FieldDescriptor] | None = None,
        factory: Callable[..., T] | None = None,
        source: GridSource | None = None,
        settings: ExportSettings | None = None,
    ) -> None:
        if descriptors is None:
            if record_type is None:
                raise UnsupportedShapeError(None, "ExcelReader needs a record_type or descriptors")
            descriptors = describe(record_type)
        factory = factory or record_type
        if factory is None:
            raise UnsupportedShapeError(None, "ExcelReader needs a record_type or factory")
        self._descriptors = tuple(descriptors)
        self._factory: Callable[..., T] = factory
        self._source = source
        self._settings = settings or ExportSettings()

    @staticmethod
    def check(path: str | Path) -> bool:
        return Path(path).is_file()

    def read(self, path: str | Path) -> list[T]:
        """Read every non-blank data row of *path* as a record.

        Raises:
            SourceReadError: *path* is not a readable file of the expected format.
            RowDecodeError: a cell cannot be converted or a record cannot be built.
        """
        path = Path(path)
        if not self.check(path):
            raise SourceReadError(str(path), f"Not a file: '{path}'")
        sheet = self._source_for(path).read(path)
        records = self.decode(sheet)
        logger.info("import_completed", source=str(path), rows=len(records))
        return records

    read_file = read

    def decode(self, sheet: RawSheet) -> list[T]:
        """Build records from an already loaded sheet."""
        columns = resolve(self._descriptors)
        fields = {d.name: d for d in exportable(self._descriptors)}
        placement = _place_columns(columns, sheet.header)

        records: list[T] = []
        for row_number, row in enumerate(sheet.rows, start=_FIRST_DATA_ROW):
            if all(is_blank(cell) for cell in row):
                continue
            kwargs: dict[str, Any] = {}
            for column, index in placement:
                raw = row[index] if index is not None and index < len(row) else None
                descriptor = fields[column.field_name]
                try:
                    value = _decode_cell(descriptor, raw)
                except ValueError as exc:
                    raise RowDecodeError(
                        f"Row {row_number}, column '{column.title}': {exc}",
                        row=row_number,
                        field=descriptor.name,
                        cause=exc,
                    ) from exc
                if value is not _OMIT:
                    kwargs[descriptor.name] = value
            try:
                records.append(self._factory(**kwargs))
            except TypeError as exc:
                raise RowDecodeError(
                    f"Row {row_number}: cannot build record: {exc}",
                    row=row_number,
                    cause=exc,
                ) from exc
        return records

    def _source_for(self, path: Path) -> GridSource:
        if self._source is not None:
            return self._source
        if path.suffix.lower() == ".csv":
            return CsvSource(self._settings.csv_delimiter)
        return ExcelSource(self._settings)


def _place_columns(columns: Sequence[Column], header: Sequence[str]) -> list[tuple[Column, int | None]]:
    positions: defaultdict[str, deque[int]] = defaultdict(deque)
    for index, title in enumerate(header):
        positions[title.strip()].append(index)
    placement: list[tuple[Column, int | None]] = []
    for column in columns:
        queue = positions.get(column.title.strip())
        placement.append((column, queue.popleft() if queue else None))
    return placement


def _decode_cell(descriptor: FieldDescriptor, raw: Any) -> Any:
    shape = descriptor.shape
    if is_blank(raw):
        if shape.is_optional:
            return Nothing() if shape.wraps_option else None
        if descriptor.value_type is str:
            return ""
        return _OMIT
    value = parse_cell(raw, descriptor.value_type)
    if shape.is_optional and shape.wraps_option:
        return Some(value)
    return value


def read_excel(
    path: str | Path,
    record_type: type[T],
    *,
    settings: ExportSettings | None = None,
) -> list[T]:
    """Read the records of *record_type* stored in *path*."""
    return ExcelReader(record_type, settings=settings).read(path)
