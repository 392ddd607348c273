"""Observability – structured logging helpers."""
from easy_excel.observability.logging.factory import LoggingFactory
from easy_excel.observability.logging.processors import ErrorDetailProcessor, get_logger

__all__ = ["ErrorDetailProcessor", "LoggingFactory", "get_logger"]
