"""Use cases for suffix extraction."""

from .counting import count_totals
from .extract_suffix import ExtractionResult, SuffixExtractor
from .ports import ByteSink, ByteSource
from .streaming import copy_remaining, emit_bytes, emit_lines, skip_bytes

__all__ = [
    "ByteSink",
    "ByteSource",
    "ExtractionResult",
    "SuffixExtractor",
    "copy_remaining",
    "count_totals",
    "emit_bytes",
    "emit_lines",
    "skip_bytes",
]
