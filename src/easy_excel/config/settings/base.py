"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True)
class Settings:
    """Immutable settings read from ``<_prefix>_<FIELD>`` environment variables.

    Instances are frozen; :meth:`replace` derives a variant. Validation
    runs on every construction, including ``replace``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject invalid values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def replace(self, **changes: object) -> Settings:
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
