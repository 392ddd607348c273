"""Reader – load records back from workbooks and CSV files."""
from easy_excel.reader.csv_source import CsvSource
from easy_excel.reader.excel_source import ExcelSource
from easy_excel.reader.record_reader import ExcelReader, read_excel
from easy_excel.reader.source import GridSource, RawSheet

__all__ = ["CsvSource", "ExcelReader", "ExcelSource", "GridSource", "RawSheet", "read_excel"]
