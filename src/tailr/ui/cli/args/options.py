"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from tailr.features.suffix import CountDirective, CountUnit


@final
@dataclass(slots=True, frozen=True)
class TailArgs:
    """Validated command line arguments for a tail run."""

    files: tuple[str, ...]
    directive: CountDirective
    unit: CountUnit
    quiet: bool
    debug: bool
    read_block_size: int
    spool_max_size: int


__all__ = ["TailArgs"]
