"""Reader – GridSource port and the raw sheet it returns."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

__all__ = ["GridSource", "RawSheet"]


@dataclasses.dataclass(frozen=True)
class RawSheet:
    """Header row and data rows as read from a file; cells keep native types."""

    header: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...]


@runtime_checkable
class GridSource(Protocol):
    """Port: reads a header row followed by data rows."""

    def read(self, path: Path) -> RawSheet: ...
