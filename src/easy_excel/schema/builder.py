"""Schema – SchemaBuilder for explicit field registration."""
from __future__ import annotations

import dataclasses
import operator
from typing import Any, Callable, Literal

from easy_excel.kernel.errors import InvalidFieldMetadataError
from easy_excel.schema.field import NESTED_LIST, PLAIN, FieldDescriptor, FieldShape
from easy_excel.schema.introspect import describe

_UNSET: Any = object()


class SchemaBuilder:
    """Fluent builder producing an ordered tuple of :class:`FieldDescriptor`.

    Use it when records are not dataclasses (e.g. plain dicts), or to patch
    the metadata of a reflected record type without touching its source.

    Example::

        descriptors = (
            SchemaBuilder(access="key")
            .field("name", title="姓名", order=1)
            .field("age", title="年龄", order=2, value_type=int)
            .optional("sex", title="性别", order=9)
            .nested("children")
            .build()
        )
    """

    def __init__(self, *, access: Literal["attribute", "key"] = "attribute") -> None:
        if access not in ("attribute", "key"):
            raise ValueError(f"Unsupported access mode: {access!r}")
        self._access = access
        self._fields: dict[str, FieldDescriptor] = {}

    @classmethod
    def from_type(cls, record_type: type) -> SchemaBuilder:
        """Start from the descriptors reflected from *record_type*."""
        builder = cls()
        for descriptor in describe(record_type):
            builder._add(descriptor)
        return builder

    def field(
        self,
        name: str,
        *,
        title: str | None = None,
        order: int | None = None,
        width: int | None = None,
        value_type: Any = str,
        getter: Callable[[Any], Any] | None = None,
    ) -> SchemaBuilder:
        return self._register(name, PLAIN, title, order, width, value_type, getter)

    def optional(
        self,
        name: str,
        *,
        title: str | None = None,
        order: int | None = None,
        width: int | None = None,
        value_type: Any = str,
        getter: Callable[[Any], Any] | None = None,
        wraps_option: bool = False,
    ) -> SchemaBuilder:
        shape = FieldShape.optional(PLAIN, wraps_option=wraps_option)
        return self._register(name, shape, title, order, width, value_type, getter)

    def nested(self, name: str, *, title: str | None = None) -> SchemaBuilder:
        """Declare a nested record list; it is never exported."""
        return self._register(name, NESTED_LIST, title, None, None, list, None)

    def override(
        self,
        name: str,
        *,
        title: str | None = _UNSET,
        order: int | None = _UNSET,
        width: int | None = _UNSET,
    ) -> SchemaBuilder:
        """Replace selected metadata of an already registered field."""
        try:
            current = self._fields[name]
        except KeyError:
            raise InvalidFieldMetadataError(name, "no such field to override") from None
        changes = {
            key: value
            for key, value in (("title", title), ("order", order), ("width", width))
            if value is not _UNSET
        }
        self._fields[name] = dataclasses.replace(current, **changes)
        return self

    def build(self) -> tuple[FieldDescriptor, ...]:
        return tuple(self._fields.values())

    def _register(
        self,
        name: str,
        shape: FieldShape,
        title: str | None,
        order: int | None,
        width: int | None,
        value_type: Any,
        getter: Callable[[Any], Any] | None,
    ) -> SchemaBuilder:
        if getter is None and self._access == "key":
            getter = operator.methodcaller("get", name)
        self._add(
            FieldDescriptor(
                name=name,
                shape=shape,
                title=title,
                order=order,
                width=width,
                value_type=value_type,
                accessor=getter,
            )
        )
        return self

    def _add(self, descriptor: FieldDescriptor) -> None:
        if descriptor.name in self._fields:
            raise InvalidFieldMetadataError(descriptor.name, "field registered twice")
        self._fields[descriptor.name] = descriptor


__all__ = ["SchemaBuilder"]
