"""ExcelModel – mixin giving a record class its own write/read entry points."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Self

from easy_excel.config.settings import ExportSettings
from easy_excel.export.export_service import ExportService
from easy_excel.reader.record_reader import ExcelReader
from easy_excel.schema.field import FieldDescriptor
from easy_excel.schema.introspect import describe
from easy_excel.schema.resolver import Column, resolve

__all__ = ["ExcelModel"]


class ExcelModel:
    """Mixin for dataclass records.

    Example::

        @dataclass
        class User(ExcelModel):
            name: Annotated[str, excel("姓名", order=1)]
            age: Annotated[int, excel("年龄", order=2)]

        User.write_excel(users, "users.xlsx")
        again = User.read_excel("users.xlsx")
    """

    __slots__ = ()

    @classmethod
    def excel_descriptors(cls) -> tuple[FieldDescriptor, ...]:
        return describe(cls)

    @classmethod
    def excel_columns(cls) -> tuple[Column, ...]:
        return resolve(cls.excel_descriptors())

    @classmethod
    def write_excel(
        cls,
        records: Iterable[Self],
        path: str | Path,
        *,
        settings: ExportSettings | None = None,
    ) -> Path:
        service = ExportService(settings)
        return service.write(records, path, record_type=cls)

    @classmethod
    def read_excel(cls, path: str | Path, *, settings: ExportSettings | None = None) -> list[Self]:
        return ExcelReader(cls, settings=settings).read(path)
