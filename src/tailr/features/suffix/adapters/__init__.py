"""Adapters that provide byte sources for suffix extraction."""

from .local import STDIN_ARGUMENT, STDIN_NAME, FileSource, StreamSource, source_for

__all__ = ["FileSource", "STDIN_ARGUMENT", "STDIN_NAME", "StreamSource", "source_for"]
