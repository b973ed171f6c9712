"""Pure domain logic for suffix extraction: directives, totals and offsets."""

from .count_spec import (
    PLUS_ZERO,
    CountDirective,
    CountUnit,
    PlusZero,
    TakeNum,
    describe,
    parse_count,
)
from .errors import InvalidCountSpecError, SourceOpenError, TailError
from .offsets import Totals, compute_start

__all__ = [
    "CountDirective",
    "CountUnit",
    "InvalidCountSpecError",
    "PLUS_ZERO",
    "PlusZero",
    "SourceOpenError",
    "TailError",
    "TakeNum",
    "Totals",
    "compute_start",
    "describe",
    "parse_count",
]
