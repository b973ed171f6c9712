"""
Summary: Protocols for re-readable byte sources and the sink emitted bytes go to.
Why: Let the two-pass extractor run against files, pipes and test doubles alike.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol


class ByteSource(Protocol):
    """A named, re-readable source of bytes."""

    @property
    def name(self) -> str:
        """Display name used in headers and diagnostics."""

        ...

    def open(self) -> BinaryIO:
        """Return a fresh stream positioned at the first byte.

        Called once per pass; the caller closes the returned stream.
        """

        ...

    def close(self) -> None:
        """Release anything kept between passes."""

        ...


class ByteSink(Protocol):
    """Destination for emitted bytes."""

    def write(self, data: bytes, /) -> int | None:
        """Write ``data`` in full."""

        ...

    def flush(self) -> None:
        """Flush buffered output."""

        ...


__all__ = ["ByteSink", "ByteSource"]
