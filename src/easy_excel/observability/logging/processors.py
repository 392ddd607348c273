"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from easy_excel.kernel.errors import BaseError


class ErrorDetailProcessor:
    """structlog processor that expands ``error=`` values raised by this library.

    When an event carries an ``error`` that is a :class:`BaseError`, its
    ``code`` and ``detail`` are copied into ``error_code`` / ``error_detail``
    so JSON output stays machine-readable.

    Usage::

        structlog.configure(processors=[ErrorDetailProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        error = event_dict.get("error")
        if isinstance(error, BaseError):
            event_dict.setdefault("error_code", error.code)
            if error.detail:
                event_dict.setdefault("error_detail", error.detail)
            event_dict["error"] = error.message
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorDetailProcessor", "get_logger"]
