"""
Summary: Use case extracting the selected suffix of one byte source in two passes.
Why: Split counting from emitting so callers can act between the passes.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import Logger, getLogger

from ..domain.count_spec import CountDirective, CountUnit, describe
from ..domain.errors import SourceOpenError
from ..domain.offsets import Totals, compute_start
from .counting import count_totals
from .ports import ByteSink, ByteSource
from .streaming import emit_bytes, emit_lines


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Outcome of extracting the suffix of a single source."""

    source_name: str
    totals: Totals
    start: int | None
    bytes_written: int


class SuffixExtractor:
    """Run the count pass, derive the start offset, then run the emit pass."""

    _block_size: int
    _logger: Logger

    def __init__(self, *, block_size: int, logger: Logger | None = None) -> None:
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self._block_size = block_size
        self._logger = logger or getLogger(__name__)

    def count(self, source: ByteSource) -> Totals:
        """Open ``source`` and count its lines and bytes.

        Raises:
            SourceOpenError: If the source cannot be opened.
            OSError: If reading fails after a successful open.
        """
        try:
            stream = source.open()
        except OSError as exc:
            raise SourceOpenError(source.name, exc) from exc

        with stream:
            totals = count_totals(stream, block_size=self._block_size)
        self._logger.debug("%s: lines=%d bytes=%d", source.name, totals.lines, totals.bytes)
        return totals

    def emit(
        self,
        source: ByteSource,
        directive: CountDirective,
        unit: CountUnit,
        totals: Totals,
        sink: ByteSink,
    ) -> ExtractionResult:
        """Write the part of ``source`` selected by ``directive`` to ``sink``."""

        start = compute_start(directive, totals.for_unit(unit))
        self._logger.debug(
            "%s: %s %s -> start=%s",
            source.name,
            describe(directive),
            unit.value,
            start,
        )
        if start is None:
            return ExtractionResult(source.name, totals, None, 0)

        emit = emit_bytes if unit is CountUnit.BYTES else emit_lines
        with source.open() as stream:
            written = emit(stream, sink, start, block_size=self._block_size)
        return ExtractionResult(source.name, totals, start, written)

    def extract(
        self,
        source: ByteSource,
        directive: CountDirective,
        unit: CountUnit,
        sink: ByteSink,
    ) -> ExtractionResult:
        """Count pass followed by emit pass."""

        totals = self.count(source)
        return self.emit(source, directive, unit, totals, sink)


__all__ = ["ExtractionResult", "SuffixExtractor"]
