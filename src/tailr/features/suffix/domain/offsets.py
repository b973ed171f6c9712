"""
Summary: Map a count directive and a per-file total onto a zero-based start offset.
Why: Keep the signed and zero edge cases in one pure function shared by lines and bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .count_spec import CountDirective, CountUnit, PlusZero


@dataclass(slots=True, frozen=True)
class Totals:
    """Line and byte counts gathered by one forward pass over a source."""

    lines: int
    bytes: int

    def __post_init__(self) -> None:
        if self.lines < 0 or self.bytes < 0:
            raise ValueError(f"Totals must be non-negative: {self.lines}, {self.bytes}")

    def for_unit(self, unit: CountUnit) -> int:
        """Return the total matching ``unit``."""

        return self.lines if unit is CountUnit.LINES else self.bytes


def compute_start(directive: CountDirective, total: int) -> int | None:
    """Return the zero-based unit index to start emitting from.

    Args:
        directive: Parsed count argument.
        total: Number of lines or bytes in the source.

    Returns:
        int | None: Start index, or ``None`` when nothing should be emitted.
    """
    if isinstance(directive, PlusZero):
        return 0 if total > 0 else None

    num = directive.value
    if num == 0 or total == 0 or num > total:
        return None

    start = total + num if num < 0 else num - 1
    return max(start, 0)


__all__ = ["Totals", "compute_start"]
