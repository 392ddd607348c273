"""Application-layer errors – configuration and usage problems."""

from __future__ import annotations

from easy_excel.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern at the library entry points."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
