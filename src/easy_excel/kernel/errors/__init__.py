"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── UnsupportedShapeError
    │   ├── InvalidFieldMetadataError
    │   ├── MissingOptionalValueError
    │   └── RowDecodeError
    ├── ApplicationError             (application.py)
    │   └── ConfigError              (config.validation)
    └── InfrastructureError          (infrastructure.py)
        ├── SinkWriteError
        └── SourceReadError
"""

from easy_excel.kernel.errors.application import ApplicationError
from easy_excel.kernel.errors.base import BaseError
from easy_excel.kernel.errors.domain import (
    DomainError,
    InvalidFieldMetadataError,
    MissingOptionalValueError,
    RowDecodeError,
    UnsupportedShapeError,
)
from easy_excel.kernel.errors.infrastructure import (
    InfrastructureError,
    SinkWriteError,
    SourceReadError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidFieldMetadataError",
    "MissingOptionalValueError",
    "RowDecodeError",
    "SinkWriteError",
    "SourceReadError",
    "UnsupportedShapeError",
]
