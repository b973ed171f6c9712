"""Exceptions raised by the suffix extraction feature."""

from __future__ import annotations


class TailError(Exception):
    """Base class for tailr domain errors."""


class InvalidCountSpecError(TailError, ValueError):
    """A count argument is not a valid signed decimal integer."""

    value: str

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return self.value


class SourceOpenError(TailError):
    """A source could not be opened for its first pass."""

    source_name: str
    reason: str

    def __init__(self, source_name: str, cause: OSError) -> None:
        self.source_name = source_name
        self.reason = cause.strerror or str(cause)
        super().__init__(f"{source_name}: {self.reason}")


__all__ = ["InvalidCountSpecError", "SourceOpenError", "TailError"]
