"""Schema – parse cell contents back into typed field values."""
from __future__ import annotations

import datetime as _dt
import enum
from decimal import Decimal, InvalidOperation
from typing import Any

__all__ = ["is_blank", "parse_cell"]

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def parse_cell(raw: Any, value_type: Any) -> Any:  # noqa: PLR0911, PLR0912
    """Convert *raw* (text, or a native value from a workbook) to *value_type*.

    Unknown or generic target types receive the cell text unchanged.

    Raises:
        ValueError: the cell cannot be interpreted as *value_type*.
    """
    if type(raw) is value_type:
        return raw

    text = raw if isinstance(raw, str) else _native_text(raw)

    if value_type is str:
        return text
    if value_type is bool:
        lowered = text.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"not a boolean: {text!r}")
    if value_type is int:
        if isinstance(raw, float) and raw.is_integer():
            return int(raw)
        return int(text.strip())
    if value_type is float:
        return float(text.strip())
    if value_type is Decimal:
        try:
            return Decimal(text.strip())
        except InvalidOperation as exc:
            raise ValueError(f"not a decimal: {text!r}") from exc
    if value_type is _dt.datetime:
        return _dt.datetime.fromisoformat(text.strip())
    if value_type is _dt.date:
        if isinstance(raw, _dt.datetime):
            return raw.date()
        return _dt.date.fromisoformat(text.strip())
    if value_type is _dt.time:
        return _dt.time.fromisoformat(text.strip())
    if isinstance(value_type, type) and issubclass(value_type, enum.Enum):
        return _parse_enum(text.strip(), value_type)
    return text


def _native_text(raw: Any) -> str:
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    if isinstance(raw, (_dt.datetime, _dt.date, _dt.time)):
        return raw.isoformat()
    return str(raw)


def _parse_enum(text: str, enum_type: type[enum.Enum]) -> enum.Enum:
    for member in enum_type:
        if _native_text(member.value) == text:
            return member
    try:
        return enum_type[text]
    except KeyError:
        raise ValueError(f"{text!r} is not a valid {enum_type.__name__}") from None
