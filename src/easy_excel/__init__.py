"""
easy_excel – export typed records to spreadsheets and read them back.

Import path convention::

    from easy_excel import excel, write_excel, read_excel
    from easy_excel.schema import resolve, project, assemble
    from easy_excel.kernel.errors import MissingOptionalValueError
"""

from easy_excel.config import ExportSettings
from easy_excel.export import ExportService, write_excel
from easy_excel.kernel.types import Nothing, Option, Some
from easy_excel.reader import ExcelReader, read_excel
from easy_excel.record import ExcelModel
from easy_excel.schema import SchemaBuilder, excel, excel_field

__version__ = "0.1.0"
__all__ = [
    "ExcelModel",
    "ExcelReader",
    "ExportService",
    "ExportSettings",
    "Nothing",
    "Option",
    "SchemaBuilder",
    "Some",
    "__version__",
    "excel",
    "excel_field",
    "read_excel",
    "write_excel",
]
