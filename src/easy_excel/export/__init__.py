"""Export – grid sinks and the export service."""
from easy_excel.export.csv_export import CsvExporter
from easy_excel.export.excel_export import ExcelExporter, display_width
from easy_excel.export.export_service import ExportService, format_for_path, write_excel
from easy_excel.export.sink import FileSink, GridExporter, GridSink

__all__ = [
    "CsvExporter",
    "ExcelExporter",
    "ExportService",
    "FileSink",
    "GridExporter",
    "GridSink",
    "display_width",
    "format_for_path",
    "write_excel",
]
