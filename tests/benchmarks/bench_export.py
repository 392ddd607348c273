"""Benchmark: schema resolution, row projection and workbook rendering.

Each stage is measured on its own so a regression can be pinned to the
resolver, the projector or the openpyxl exporter.
"""

from __future__ import annotations

import dataclasses
from typing import Annotated

import pytest

from easy_excel.export import CsvExporter, ExcelExporter, ExportService
from easy_excel.schema import assemble, describe, excel, project_all, resolve


@dataclasses.dataclass
class BenchUser:
    name: Annotated[str, excel("姓名", order=1)]
    age: Annotated[int, excel("年龄", order=2)]
    email: Annotated[str | None, excel("Email", order=3, width=30)] = None


_DESCRIPTORS = describe(BenchUser)
_SCHEMA = resolve(_DESCRIPTORS)


@pytest.fixture(scope="module")
def users() -> list[BenchUser]:
    return [BenchUser(f"user{i}", i % 90, f"user{i}@example.com") for i in range(10_000)]


def test_describe(benchmark) -> None:
    benchmark(describe, BenchUser)


def test_resolve(benchmark) -> None:
    benchmark(resolve, _DESCRIPTORS)


def test_project_all(benchmark, users) -> None:
    rows = benchmark(lambda: list(project_all(users, _DESCRIPTORS)))
    assert len(rows) == len(users)


def test_assemble(benchmark, users) -> None:
    rows = list(project_all(users, _DESCRIPTORS))
    grid = benchmark(assemble, _SCHEMA, rows)
    assert grid.row_count == len(users)


def test_build_grid(benchmark, users) -> None:
    service = ExportService()
    benchmark(service.build_grid, users, BenchUser)


def test_csv_export(benchmark, users) -> None:
    grid = ExportService().build_grid(users, BenchUser)
    data = benchmark(CsvExporter().export, grid)
    assert data


def test_xlsx_export(benchmark, users) -> None:
    grid = ExportService().build_grid(users, BenchUser)
    data = benchmark.pedantic(ExcelExporter().export, args=(grid,), rounds=3)
    assert data.startswith(b"PK")
