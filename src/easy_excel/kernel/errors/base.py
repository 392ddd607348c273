"""Root error class for the easy-excel error hierarchy."""

from __future__ import annotations

import json
from typing import Any


def _restore(cls: type[BaseError], message: str, state: dict[str, Any]) -> BaseError:
    error = cls.__new__(cls)
    Exception.__init__(error, message)
    error.__dict__.update(state)
    if error.cause is not None:
        error.__cause__ = error.cause
    return error


class BaseError(Exception):
    """Root of every error raised by easy-excel.

    Subclasses take their own positional arguments (field name, row,
    destination) and fold them into ``detail``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Field names, row numbers, paths and the like.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, ...]:
        # Subclass constructors take different arguments; rebuild from state.
        return _restore, (type(self), self.message, dict(self.__dict__))

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for structured log events; ``cause`` appears as its repr."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
