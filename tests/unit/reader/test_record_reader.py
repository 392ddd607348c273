"""Unit tests for ExcelReader, ExcelSource and CsvSource."""

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
from pathlib import Path
from typing import Annotated

import openpyxl
import pytest

from easy_excel.config import ExportSettings
from easy_excel.kernel.errors import RowDecodeError, SourceReadError, UnsupportedShapeError
from easy_excel.kernel.types import Nothing, Option, Some
from easy_excel.reader import CsvSource, ExcelReader, ExcelSource, GridSource, RawSheet, read_excel
from easy_excel.schema import SchemaBuilder, excel
from easy_excel.testing import InMemorySource


class Role(enum.Enum):
    ADMIN = "admin"
    GUEST = "guest"


@dataclasses.dataclass
class User:
    name: Annotated[str, excel("姓名", order=1)]
    age: Annotated[int, excel("年龄", order=2)]
    children: Annotated[list["User"], excel("list", order=4)] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Account:
    login: Annotated[str, excel("Login", order=1)]
    active: Annotated[bool, excel("Active", order=2)] = True
    role: Annotated[Role, excel("Role", order=3)] = Role.GUEST
    joined: Annotated[dt.date | None, excel("Joined", order=4)] = None
    level: Annotated[Option[int], excel("Level", order=5)] = dataclasses.field(default_factory=Nothing)
    secret: str = "untouched"


def _reader(record_type, header, rows, **kw) -> ExcelReader:
    return ExcelReader(record_type, source=InMemorySource(header, rows), **kw)


@pytest.fixture
def any_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.xlsx"
    path.write_bytes(b"")
    return path


# ---------------------------------------------------------------------------
# Construction / check
# ---------------------------------------------------------------------------


class TestExcelReaderSetup:
    def test_requires_type_or_descriptors(self) -> None:
        with pytest.raises(UnsupportedShapeError):
            ExcelReader()

    def test_descriptors_without_factory(self) -> None:
        descriptors = SchemaBuilder(access="key").field("a", title="A").build()
        with pytest.raises(UnsupportedShapeError, match="factory"):
            ExcelReader(descriptors=descriptors)

    def test_check_true_for_file(self, any_file: Path) -> None:
        assert ExcelReader.check(any_file)

    def test_check_false_for_directory(self, tmp_path: Path) -> None:
        assert not ExcelReader.check(tmp_path)

    def test_check_false_for_missing(self, tmp_path: Path) -> None:
        assert not ExcelReader.check(tmp_path / "missing.xlsx")

    def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError, match="Not a file"):
            ExcelReader(User).read(tmp_path / "missing.xlsx")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestExcelReaderDecode:
    def test_reads_records(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "年龄"], [["user1", "1"], ["user2", "2"]])
        assert reader.read(any_file) == [User("user1", 1), User("user2", 2)]

    def test_read_file_alias(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "年龄"], [["user1", "1"]])
        assert reader.read_file(any_file) == [User("user1", 1)]

    def test_columns_matched_by_title_not_position(self, any_file: Path) -> None:
        reader = _reader(User, ["年龄", "姓名"], [["3", "x"]])
        assert reader.read(any_file) == [User("x", 3)]

    def test_unknown_columns_ignored(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "Extra", "年龄"], [["x", "?", "3"]])
        assert reader.read(any_file) == [User("x", 3)]

    def test_blank_rows_skipped(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "年龄"], [["a", "1"], [None, ""], ["b", "2"]])
        assert [u.name for u in reader.read(any_file)] == ["a", "b"]

    def test_native_cell_values(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "年龄"], [["a", 7]])
        assert reader.read(any_file) == [User("a", 7)]

    def test_short_rows_padded(self, any_file: Path) -> None:
        reader = _reader(Account, ["Login", "Active"], [["bob"]])
        (account,) = reader.read(any_file)
        assert account.active is True

    def test_typed_fields(self, any_file: Path) -> None:
        reader = _reader(
            Account,
            ["Login", "Active", "Role", "Joined", "Level"],
            [["ann", "false", "admin", "2024-02-01", "3"]],
        )
        (account,) = reader.read(any_file)
        assert account.active is False
        assert account.role is Role.ADMIN
        assert account.joined == dt.date(2024, 2, 1)
        assert account.level == Some(3)
        assert account.secret == "untouched"

    def test_blank_optional_cells(self, any_file: Path) -> None:
        reader = _reader(Account, ["Login", "Joined", "Level"], [["ann", "", None]])
        (account,) = reader.read(any_file)
        assert account.joined is None
        assert account.level == Nothing()

    def test_blank_plain_cell_uses_default(self, any_file: Path) -> None:
        reader = _reader(Account, ["Login", "Role"], [["ann", ""]])
        assert reader.read(any_file)[0].role is Role.GUEST

    def test_blank_str_cell_is_empty_string(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "年龄"], [["", "4"]])
        assert reader.read(any_file) == [User("", 4)]

    def test_missing_required_column(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名"], [["x"]])
        with pytest.raises(RowDecodeError, match="Row 2") as info:
            reader.read(any_file)
        assert info.value.row == 2

    def test_bad_cell_reports_row_and_field(self, any_file: Path) -> None:
        reader = _reader(User, ["姓名", "年龄"], [["a", "1"], ["b", "old"]])
        with pytest.raises(RowDecodeError) as info:
            reader.read(any_file)
        assert info.value.row == 3
        assert info.value.field == "age"
        assert info.value.code == "row_decode_error"
        assert isinstance(info.value.cause, ValueError)

    def test_duplicate_titles_consumed_in_schema_order(self, any_file: Path) -> None:
        descriptors = (
            SchemaBuilder(access="key").field("a", title="姓名").field("b", title="姓名").build()
        )
        reader = ExcelReader(
            descriptors=descriptors, factory=dict, source=InMemorySource(["姓名", "姓名"], [["x", "y"]])
        )
        assert reader.read(any_file) == [{"a": "x", "b": "y"}]

    def test_decode_from_sheet(self) -> None:
        reader = ExcelReader(User)
        sheet = RawSheet(header=("姓名", "年龄"), rows=(("z", "9"),))
        assert reader.decode(sheet) == [User("z", 9)]

    def test_source_sees_path(self, any_file: Path) -> None:
        source = InMemorySource(["姓名", "年龄"], [])
        ExcelReader(User, source=source).read(any_file)
        assert source.paths == [any_file]


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class TestExcelSource:
    def test_is_grid_source(self) -> None:
        assert isinstance(ExcelSource(), GridSource)

    def test_reads_active_sheet(self, tmp_path: Path) -> None:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Data"
        ws.append(["姓名", "年龄"])
        ws.append(["a", 1])
        path = tmp_path / "in.xlsx"
        wb.save(path)

        sheet = ExcelSource().read(path)
        assert sheet.header == ("姓名", "年龄")
        assert sheet.rows == (("a", 1),)

    def test_prefers_configured_sheet(self, tmp_path: Path) -> None:
        wb = openpyxl.Workbook()
        wb.active.append(["ignored"])
        other = wb.create_sheet("Users")
        other.append(["姓名"])
        path = tmp_path / "in.xlsx"
        wb.save(path)

        sheet = ExcelSource(ExportSettings(sheet_name="Users")).read(path)
        assert sheet.header == ("姓名",)

    def test_not_a_workbook(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.xlsx"
        path.write_text("plain text")
        with pytest.raises(SourceReadError):
            ExcelSource().read(path)

    def test_read_excel_helper(self, tmp_path: Path) -> None:
        wb = openpyxl.Workbook()
        wb.active.append(["姓名", "年龄"])
        wb.active.append(["a", "5"])
        path = tmp_path / "in.xlsx"
        wb.save(path)
        assert read_excel(path, User) == [User("a", 5)]


class TestCsvSource:
    def test_reads_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("姓名,年龄\r\na,1\r\n", encoding="utf-8")
        sheet = CsvSource().read(path)
        assert sheet.header == ("姓名", "年龄")
        assert sheet.rows == (("a", "1"),)

    def test_strips_bom(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_bytes("\ufeff姓名\r\na\r\n".encode("utf-8"))
        assert CsvSource().read(path).header == ("姓名",)

    def test_custom_delimiter(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("A;B\n1;2\n", encoding="utf-8")
        assert CsvSource(";").read(path).rows == (("1", "2"),)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("", encoding="utf-8")
        assert CsvSource().read(path) == RawSheet(header=(), rows=())

    def test_reader_picks_csv_source_by_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "users.csv"
        path.write_text("姓名,年龄\nuser1,1\n", encoding="utf-8")
        assert ExcelReader(User).read(path) == [User("user1", 1)]

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(SourceReadError):
            CsvSource().read(path)
