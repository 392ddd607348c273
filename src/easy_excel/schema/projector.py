"""Schema – project records into ``title_key -> str`` rows."""
from __future__ import annotations

import datetime as _dt
import enum
from decimal import Decimal
from typing import Any, Iterable, Iterator

from easy_excel.kernel.errors import MissingOptionalValueError
from easy_excel.kernel.types import Nothing, Some
from easy_excel.schema.field import FieldDescriptor
from easy_excel.schema.resolver import exportable, title_key

__all__ = ["ProjectedRow", "project", "project_all", "render_value"]

type ProjectedRow = dict[str, str]


def render_value(value: Any) -> str:
    """Canonical display string for a single cell value.

    ``bool`` renders as ``"true"``/``"false"``, dates and times as ISO 8601,
    enums through their value, ``None`` as an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, enum.Enum):
        return render_value(value.value)
    if isinstance(value, (_dt.datetime, _dt.date, _dt.time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, Some):
        return render_value(value.unwrap())
    if isinstance(value, Nothing):
        return ""
    return str(value)


def _unwrap_optional(descriptor: FieldDescriptor, value: Any) -> Any:
    if value is None or isinstance(value, Nothing):
        raise MissingOptionalValueError(descriptor.name, descriptor.title)
    if isinstance(value, Some):
        return value.unwrap()
    return value


def project(record: Any, descriptors: Iterable[FieldDescriptor]) -> ProjectedRow:
    """Render one record as a mapping from title key to cell text.

    Raises:
        MissingOptionalValueError: an exported optional field holds ``None``
            or ``Nothing``.
    """
    row: ProjectedRow = {}
    for descriptor in exportable(descriptors):
        value = descriptor.get(record)
        if descriptor.shape.is_optional:
            value = _unwrap_optional(descriptor, value)
        row[title_key(descriptor.title, descriptor.name)] = render_value(value)  # type: ignore[arg-type]
    return row


def project_all(records: Iterable[Any], descriptors: Iterable[FieldDescriptor]) -> Iterator[ProjectedRow]:
    """Project *records* in order, tagging failures with the record index."""
    fields = exportable(descriptors)
    for index, record in enumerate(records):
        try:
            yield project(record, fields)
        except MissingOptionalValueError as exc:
            raise exc.at(index) from exc
