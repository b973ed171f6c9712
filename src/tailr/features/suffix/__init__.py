"""Public surface for the suffix extraction feature."""

from .adapters import FileSource, StreamSource, source_for
from .domain import (
    PLUS_ZERO,
    CountDirective,
    CountUnit,
    InvalidCountSpecError,
    PlusZero,
    SourceOpenError,
    TailError,
    TakeNum,
    Totals,
    compute_start,
    parse_count,
)
from .usecases import ByteSink, ByteSource, ExtractionResult, SuffixExtractor

__all__ = [
    "ByteSink",
    "ByteSource",
    "CountDirective",
    "CountUnit",
    "ExtractionResult",
    "FileSource",
    "InvalidCountSpecError",
    "PLUS_ZERO",
    "PlusZero",
    "SourceOpenError",
    "StreamSource",
    "SuffixExtractor",
    "TailError",
    "TakeNum",
    "Totals",
    "compute_start",
    "parse_count",
    "source_for",
]
