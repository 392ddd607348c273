"""Domain errors – schema, projection and decoding failures."""

from __future__ import annotations

from typing import Any

from easy_excel.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a record or its schema cannot be turned into a table."""

    default_code = "domain_error"


class UnsupportedShapeError(DomainError):
    """The record type is not a flat structure of named fields."""

    default_code = "unsupported_shape"

    def __init__(
        self,
        record_type: Any,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        type_name = getattr(record_type, "__qualname__", repr(record_type))
        super().__init__(
            message or f"Unsupported record type '{type_name}': expected a dataclass or NamedTuple",
            detail={"record_type": type_name},
            **kwargs,
        )
        self.record_type = record_type


class InvalidFieldMetadataError(DomainError):
    """Field metadata (title, order, width) is malformed."""

    default_code = "invalid_field_metadata"

    def __init__(self, field_name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid metadata for field '{field_name}': {reason}",
            detail={"field": field_name},
            **kwargs,
        )
        self.field_name = field_name
        self.reason = reason


class MissingOptionalValueError(DomainError):
    """An exported optional field holds no value.

    Raised during row projection; aborts the whole export call.
    """

    default_code = "missing_optional_value"

    def __init__(
        self,
        field_name: str,
        title: str | None = None,
        *,
        record_index: int | None = None,
        **kwargs: Any,
    ) -> None:
        msg = f"Optional field '{field_name}' has no value"
        if record_index is not None:
            msg = f"{msg} (record {record_index})"
        super().__init__(
            msg,
            detail={"field": field_name, "title": title, "record_index": record_index},
            **kwargs,
        )
        self.field_name = field_name
        self.title = title
        self.record_index = record_index

    def at(self, record_index: int) -> "MissingOptionalValueError":
        """Return a copy of this error located at *record_index*."""
        return MissingOptionalValueError(
            self.field_name,
            self.title,
            record_index=record_index,
            cause=self.cause,
        )


class RowDecodeError(DomainError):
    """A sheet row could not be turned back into a record."""

    default_code = "row_decode_error"

    def __init__(
        self,
        message: str,
        *,
        row: int | None = None,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, detail={"row": row, "field": field}, **kwargs)
        self.row = row
        self.field = field


__all__ = [
    "DomainError",
    "InvalidFieldMetadataError",
    "MissingOptionalValueError",
    "RowDecodeError",
    "UnsupportedShapeError",
]
