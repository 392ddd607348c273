"""Schema – resolve FieldDescriptors into an ordered column schema.

Columns are sorted by ``order`` ascending. Fields without an explicit order
get :data:`DEFAULT_ORDER`, a fixed rank rather than "after the last declared
order": unordered fields share that rank with any field explicitly ordered
``99`` and keep their declaration order among themselves.

``title_key`` joins the display title and the field name with
:data:`TITLE_KEY_SEPARATOR`. Two fields whose names themselves contain the
separator can still produce the same key (``"a-b" + "-" + "c"`` equals
``"a" + "-" + "b-c"``); such schemas are not rejected.
"""
from __future__ import annotations

import dataclasses
from typing import Iterable

from easy_excel.schema.field import FieldDescriptor

__all__ = [
    "AUTO_WIDTH",
    "DEFAULT_ORDER",
    "TITLE_KEY_SEPARATOR",
    "Column",
    "exportable",
    "resolve",
    "title_key",
]

DEFAULT_ORDER = 99
AUTO_WIDTH = 0
TITLE_KEY_SEPARATOR = "-"


@dataclasses.dataclass(frozen=True)
class Column:
    """One resolved column of the export schema."""

    title: str
    title_key: str
    order: int = DEFAULT_ORDER
    width: int = AUTO_WIDTH
    field_name: str = ""

    @property
    def auto_width(self) -> bool:
        return self.width == AUTO_WIDTH


def exportable(descriptors: Iterable[FieldDescriptor]) -> list[FieldDescriptor]:
    """Titled, non-nested descriptors in declaration order.

    Shared by the resolver, the row projector and the reader so schema and
    rows always agree on the field set.
    """
    return [d for d in descriptors if d.is_exported]


def title_key(title: str, name: str) -> str:
    return f"{title}{TITLE_KEY_SEPARATOR}{name}"


def resolve(descriptors: Iterable[FieldDescriptor]) -> tuple[Column, ...]:
    """Return the column schema for *descriptors*.

    An empty or fully untitled descriptor set yields an empty schema.
    """
    columns = [
        Column(
            title=d.title,  # type: ignore[arg-type]  # exportable() guarantees a title
            title_key=title_key(d.title, d.name),  # type: ignore[arg-type]
            order=DEFAULT_ORDER if d.order is None else d.order,
            width=AUTO_WIDTH if d.width is None else d.width,
            field_name=d.name,
        )
        for d in exportable(descriptors)
    ]
    # sorted() is stable: equal orders keep declaration order.
    return tuple(sorted(columns, key=lambda c: c.order))
