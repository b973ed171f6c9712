"""
Summary: Forward pass that counts line terminators and bytes in fixed-size blocks.
Why: Offsets need exact totals before any output decision, without buffering the file.
"""

from __future__ import annotations

from typing import BinaryIO

from ..domain.offsets import Totals

LINE_TERMINATOR = b"\n"


def count_totals(stream: BinaryIO, *, block_size: int) -> Totals:
    """Count lines and bytes remaining in ``stream``.

    A trailing line without a terminator still counts as one line.

    Args:
        stream: Binary stream positioned at the start of the data.
        block_size: Number of bytes read per iteration.

    Returns:
        Totals: Line and byte counts.
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    lines = 0
    total_bytes = 0
    last_byte = b""
    while block := stream.read(block_size):
        lines += block.count(LINE_TERMINATOR)
        total_bytes += len(block)
        last_byte = block[-1:]

    if total_bytes and last_byte != LINE_TERMINATOR:
        lines += 1
    return Totals(lines=lines, bytes=total_bytes)


__all__ = ["LINE_TERMINATOR", "count_totals"]
