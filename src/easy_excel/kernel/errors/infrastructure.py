"""Infrastructure errors – sink and source I/O failures."""

from __future__ import annotations

from typing import Any

from easy_excel.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a schema or record problem."""

    default_code = "infrastructure_error"


class SinkWriteError(InfrastructureError):
    """The output sink failed to write the finished grid."""

    default_code = "sink_write_failure"

    def __init__(
        self,
        destination: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Could not write export to '{destination}'",
            detail={"destination": destination},
            **kwargs,
        )
        self.destination = destination


class SourceReadError(InfrastructureError):
    """The input file could not be opened or parsed as a sheet."""

    default_code = "source_read_failure"

    def __init__(
        self,
        source: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Could not read sheet from '{source}'",
            detail={"source": source},
            **kwargs,
        )
        self.source = source


__all__ = ["InfrastructureError", "SinkWriteError", "SourceReadError"]
