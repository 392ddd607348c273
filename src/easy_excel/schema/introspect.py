"""Schema – derive FieldDescriptors from dataclasses and NamedTuples."""
from __future__ import annotations

import collections.abc
import dataclasses
import types
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from easy_excel.kernel.errors import UnsupportedShapeError
from easy_excel.kernel.types import Nothing, Option, Some
from easy_excel.schema.field import (
    EXCEL_METADATA_KEY,
    NESTED_LIST,
    PLAIN,
    ExcelMeta,
    FieldDescriptor,
    FieldShape,
)

__all__ = ["classify", "describe", "is_record_type"]

# Generic origins treated as nested record collections.
_COLLECTION_ORIGINS: frozenset[Any] = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Iterable,
        collections.abc.Collection,
        collections.abc.Set,
    }
)


def is_record_type(record_type: Any) -> bool:
    """True for dataclass classes and NamedTuple classes."""
    if not isinstance(record_type, type):
        return False
    if dataclasses.is_dataclass(record_type):
        return True
    return issubclass(record_type, tuple) and hasattr(record_type, "_fields")


def describe(record_type: type) -> tuple[FieldDescriptor, ...]:
    """Return one descriptor per field of *record_type*, in declaration order.

    Excel metadata is taken from an ``Annotated[..., excel(...)]`` marker
    first, then from ``excel_field(...)`` dataclass metadata. Fields without
    either stay untitled and are therefore not exported.

    Raises:
        UnsupportedShapeError: *record_type* is not a dataclass or NamedTuple,
            or its annotations cannot be resolved.
    """
    if not is_record_type(record_type):
        raise UnsupportedShapeError(record_type)

    try:
        hints = get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as exc:
        raise UnsupportedShapeError(
            record_type,
            f"Cannot resolve type hints of '{record_type.__qualname__}': {exc}",
            cause=exc,
        ) from exc

    if dataclasses.is_dataclass(record_type):
        names = [f.name for f in dataclasses.fields(record_type)]
        field_meta = {
            f.name: f.metadata.get(EXCEL_METADATA_KEY) for f in dataclasses.fields(record_type)
        }
    else:
        names = list(record_type._fields)  # type: ignore[attr-defined]
        field_meta = {}

    descriptors: list[FieldDescriptor] = []
    for name in names:
        hint = hints.get(name, Any)
        shape, value_type, annotated_meta = classify(hint)
        meta = annotated_meta or field_meta.get(name) or ExcelMeta()
        descriptors.append(
            FieldDescriptor(
                name=name,
                shape=shape,
                title=meta.title,
                order=meta.order,
                width=meta.width,
                value_type=value_type,
            )
        )
    return tuple(descriptors)


def classify(hint: Any) -> tuple[FieldShape, Any, ExcelMeta | None]:
    """Split a type hint into (shape, innermost value type, Annotated metadata)."""
    if get_origin(hint) is Annotated:
        hint, *extras = get_args(hint)
        meta = next((e for e in extras if isinstance(e, ExcelMeta)), None)
        inner_shape, value_type, inner_meta = classify(hint)
        return inner_shape, value_type, meta or inner_meta

    origin = get_origin(hint)

    if hint is Option or origin is Option:
        args = get_args(hint)
        inner_shape, value_type, inner_meta = classify(args[0] if args else Any)
        return FieldShape.optional(inner_shape, wraps_option=True), value_type, inner_meta

    if origin is Union or origin is types.UnionType:
        args = get_args(hint)
        if _is_option_union(args):
            value_args = get_args(args[0])
            inner_shape, value_type, inner_meta = classify(value_args[0] if value_args else Any)
            return FieldShape.optional(inner_shape, wraps_option=True), value_type, inner_meta
        members = [a for a in args if a is not type(None)]
        if len(members) < len(args):
            inner = members[0] if len(members) == 1 else Union[tuple(members)]  # noqa: UP007
            inner_shape, value_type, inner_meta = classify(inner)
            return FieldShape.optional(inner_shape), value_type, inner_meta
        return PLAIN, hint, None

    if hint in _COLLECTION_ORIGINS or origin in _COLLECTION_ORIGINS:
        return NESTED_LIST, hint, None

    if hint is Any:
        return PLAIN, str, None
    return PLAIN, hint, None


def _is_option_union(args: tuple[Any, ...]) -> bool:
    origins = {get_origin(a) or a for a in args}
    return origins == {Some, Nothing}
