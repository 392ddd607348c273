"""Observability – structured logging for export and import runs."""
from easy_excel.observability.logging import ErrorDetailProcessor, LoggingFactory, get_logger

__all__ = ["ErrorDetailProcessor", "LoggingFactory", "get_logger"]
