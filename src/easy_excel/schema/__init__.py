"""Schema – field descriptors, column resolution, row projection and grid assembly.

Pipeline::

    describe(User) / SchemaBuilder  ->  FieldDescriptor...
    resolve(descriptors)            ->  Column... (ordered)
    project_all(records, ...)       ->  {title_key: str}...
    assemble(columns, rows)         ->  Grid(header, rows, widths)
"""
from easy_excel.schema.builder import SchemaBuilder
from easy_excel.schema.coerce import is_blank, parse_cell
from easy_excel.schema.field import (
    NESTED_LIST,
    PLAIN,
    ExcelMeta,
    FieldDescriptor,
    FieldShape,
    ShapeKind,
    excel,
    excel_field,
)
from easy_excel.schema.grid import Grid, assemble
from easy_excel.schema.introspect import classify, describe, is_record_type
from easy_excel.schema.projector import ProjectedRow, project, project_all, render_value
from easy_excel.schema.resolver import (
    AUTO_WIDTH,
    DEFAULT_ORDER,
    TITLE_KEY_SEPARATOR,
    Column,
    exportable,
    resolve,
    title_key,
)

__all__ = [
    "AUTO_WIDTH",
    "DEFAULT_ORDER",
    "NESTED_LIST",
    "PLAIN",
    "TITLE_KEY_SEPARATOR",
    "Column",
    "ExcelMeta",
    "FieldDescriptor",
    "FieldShape",
    "Grid",
    "ProjectedRow",
    "SchemaBuilder",
    "ShapeKind",
    "assemble",
    "classify",
    "describe",
    "excel",
    "excel_field",
    "exportable",
    "is_blank",
    "is_record_type",
    "parse_cell",
    "project",
    "project_all",
    "render_value",
    "resolve",
    "title_key",
]
