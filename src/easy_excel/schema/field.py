"""Schema – field shapes, excel metadata and FieldDescriptor."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable

from easy_excel.kernel.errors import InvalidFieldMetadataError

__all__ = [
    "EXCEL_METADATA_KEY",
    "NESTED_LIST",
    "PLAIN",
    "ExcelMeta",
    "FieldDescriptor",
    "FieldShape",
    "ShapeKind",
    "excel",
    "excel_field",
]

# Key under which excel_field() stores ExcelMeta in dataclass field metadata.
EXCEL_METADATA_KEY = "excel"


class ShapeKind(str, enum.Enum):
    PLAIN = "plain"
    OPTIONAL = "optional"
    NESTED_LIST = "nested_list"


@dataclasses.dataclass(frozen=True)
class FieldShape:
    """Declared type shape of a record field.

    ``inner`` is only set for ``OPTIONAL``. ``wraps_option`` marks optionals
    whose values are :class:`~easy_excel.kernel.types.Some` /
    :class:`~easy_excel.kernel.types.Nothing` instead of ``value | None``.
    """

    kind: ShapeKind
    inner: FieldShape | None = None
    wraps_option: bool = False

    @classmethod
    def optional(cls, inner: FieldShape | None = None, *, wraps_option: bool = False) -> FieldShape:
        return cls(ShapeKind.OPTIONAL, inner or PLAIN, wraps_option)

    @property
    def is_optional(self) -> bool:
        return self.kind is ShapeKind.OPTIONAL

    @property
    def is_nested(self) -> bool:
        """True for nested lists, also when wrapped in one or more optionals."""
        shape: FieldShape | None = self
        while shape is not None:
            if shape.kind is ShapeKind.NESTED_LIST:
                return True
            shape = shape.inner
        return False

    def __repr__(self) -> str:
        if self.kind is ShapeKind.OPTIONAL:
            return f"Optional({self.inner!r})"
        return "Plain" if self.kind is ShapeKind.PLAIN else "NestedList"


PLAIN = FieldShape(ShapeKind.PLAIN)
NESTED_LIST = FieldShape(ShapeKind.NESTED_LIST)


@dataclasses.dataclass(frozen=True)
class ExcelMeta:
    """Raw excel metadata attached to a field: title, order and width."""

    title: str | None = None
    order: int | None = None
    width: int | None = None


def excel(title: str | None = None, *, order: int | None = None, width: int | None = None) -> ExcelMeta:
    """Metadata marker for ``Annotated`` fields.

    Example::

        @dataclass
        class User:
            name: Annotated[str, excel("姓名", order=1)]
            age: Annotated[int, excel("年龄", order=2, width=8)]
    """
    return ExcelMeta(title=title, order=order, width=width)


def excel_field(
    *,
    title: str | None = None,
    order: int | None = None,
    width: int | None = None,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """``dataclasses.field`` carrying excel metadata."""
    meta = {EXCEL_METADATA_KEY: ExcelMeta(title=title, order=order, width=width)}
    if default is not dataclasses.MISSING:
        return dataclasses.field(default=default, metadata=meta)
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=meta)
    return dataclasses.field(metadata=meta)


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """One record field as the schema engine sees it.

    ``value_type`` is the innermost Python type (used when reading cells
    back). ``accessor`` defaults to attribute access by ``name``.
    """

    name: str
    shape: FieldShape = PLAIN
    title: str | None = None
    order: int | None = None
    width: int | None = None
    value_type: Any = str
    accessor: Callable[[Any], Any] | None = dataclasses.field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidFieldMetadataError(repr(self.name), "field name must be non-empty")
        if self.title is not None and not isinstance(self.title, str):
            raise InvalidFieldMetadataError(self.name, f"title must be a string, got {self.title!r}")
        if self.order is not None and (isinstance(self.order, bool) or not isinstance(self.order, int)):
            raise InvalidFieldMetadataError(self.name, f"order must be an integer, got {self.order!r}")
        if self.width is not None:
            if isinstance(self.width, bool) or not isinstance(self.width, int):
                raise InvalidFieldMetadataError(self.name, f"width must be an integer, got {self.width!r}")
            if self.width < 0:
                raise InvalidFieldMetadataError(self.name, f"width must be non-negative, got {self.width}")

    @property
    def is_exported(self) -> bool:
        """Whether the field becomes a column: titled and not a nested list."""
        return self.title is not None and not self.shape.is_nested

    def get(self, record: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(record)
        return getattr(record, self.name)

    def with_meta(self, meta: ExcelMeta) -> FieldDescriptor:
        return dataclasses.replace(self, title=meta.title, order=meta.order, width=meta.width)
