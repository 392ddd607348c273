"""Config settings – ExportSettings for workbook and CSV output."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from easy_excel.config.settings.base import Settings
from easy_excel.config.settings.loaders import EnvSettingsLoader
from easy_excel.config.validation import InvalidSettingValueError

# Excel refuses sheet titles longer than this.
MAX_SHEET_NAME_LENGTH = 31
_FORBIDDEN_SHEET_CHARS = frozenset("\\/?*[]:")


@dataclasses.dataclass(frozen=True)
class ExportSettings(Settings):
    """Rendering options read by the exporters and sources.

    Every field can be overridden from the environment with the
    ``EASY_EXCEL_`` prefix, e.g. ``EASY_EXCEL_SHEET_NAME=Users``.
    """

    _prefix: ClassVar[str] = "EASY_EXCEL"

    sheet_name: str = "Sheet1"
    bold_header: bool = True
    max_auto_width: int = 50
    csv_delimiter: str = ","
    csv_bom: bool = False

    def _validate(self) -> None:
        if not self.sheet_name or len(self.sheet_name) > MAX_SHEET_NAME_LENGTH:
            raise InvalidSettingValueError(
                "sheet_name", self.sheet_name, f"must be 1-{MAX_SHEET_NAME_LENGTH} characters"
            )
        if _FORBIDDEN_SHEET_CHARS.intersection(self.sheet_name):
            raise InvalidSettingValueError(
                "sheet_name", self.sheet_name, "contains a character Excel does not allow"
            )
        if self.max_auto_width <= 0:
            raise InvalidSettingValueError("max_auto_width", self.max_auto_width, "must be positive")
        if len(self.csv_delimiter) != 1:
            raise InvalidSettingValueError("csv_delimiter", self.csv_delimiter, "must be one character")

    @classmethod
    def from_env(cls) -> "ExportSettings":
        """Build settings from ``EASY_EXCEL_*`` environment variables."""
        return EnvSettingsLoader().load(cls)


__all__ = ["MAX_SHEET_NAME_LENGTH", "ExportSettings"]
