"""Kernel – error hierarchy and value types shared by every layer."""

from easy_excel.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidFieldMetadataError,
    MissingOptionalValueError,
    RowDecodeError,
    SinkWriteError,
    SourceReadError,
    UnsupportedShapeError,
)
from easy_excel.kernel.types import Nothing, Option, Some, option_of

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidFieldMetadataError",
    "MissingOptionalValueError",
    "Nothing",
    "Option",
    "RowDecodeError",
    "SinkWriteError",
    "Some",
    "SourceReadError",
    "UnsupportedShapeError",
    "option_of",
]
