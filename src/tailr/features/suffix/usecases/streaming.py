"""
Summary: Emit pass helpers that position a stream at a unit offset and copy the rest.
Why: Byte mode seeks (or discards on pipes) while line mode must rescan for terminators.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from .counting import LINE_TERMINATOR
from .ports import ByteSink


def _is_seekable(stream: BinaryIO) -> bool:
    try:
        return stream.seekable()
    except (AttributeError, ValueError):
        return False


def skip_bytes(stream: BinaryIO, count: int, *, block_size: int) -> int:
    """Advance ``stream`` to ``count`` bytes from its start.

    Seekable streams are positioned with ``seek``. Anything else (pipes,
    standard input) is read and the prefix discarded one block at a time.

    Returns:
        int: Bytes actually skipped; less than ``count`` if the data ended first.
    """
    if count <= 0:
        return 0

    if _is_seekable(stream):
        try:
            size = stream.seek(0, io.SEEK_END)
            return stream.seek(min(count, size), io.SEEK_SET)
        except io.UnsupportedOperation:
            pass

    skipped = 0
    while skipped < count:
        chunk = stream.read(min(block_size, count - skipped))
        if not chunk:
            break
        skipped += len(chunk)
    return skipped


def copy_remaining(stream: BinaryIO, sink: ByteSink, *, block_size: int) -> int:
    """Copy everything left in ``stream`` to ``sink`` and return the byte count."""

    written = 0
    while block := stream.read(block_size):
        _ = sink.write(block)
        written += len(block)
    return written


def emit_bytes(stream: BinaryIO, sink: ByteSink, start: int, *, block_size: int) -> int:
    """Write every byte from offset ``start`` (0-based) onward."""

    _ = skip_bytes(stream, start, block_size=block_size)
    return copy_remaining(stream, sink, block_size=block_size)


def emit_lines(stream: BinaryIO, sink: ByteSink, start: int, *, block_size: int) -> int:
    """Write every line from line index ``start`` (0-based) onward.

    Lines before ``start`` are read one at a time and dropped; the remainder is
    copied verbatim, including a final line without a terminator.
    """
    line_num = 0
    while line_num < start:
        line = stream.readline()
        if not line:
            return 0
        if line.endswith(LINE_TERMINATOR):
            line_num += 1
        else:
            # Unterminated tail before ``start``: nothing left to emit.
            return 0
    return copy_remaining(stream, sink, block_size=block_size)


__all__ = ["copy_remaining", "emit_bytes", "emit_lines", "skip_bytes"]
