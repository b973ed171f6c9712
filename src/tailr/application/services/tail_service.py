"""Application service that runs suffix extraction over a list of file arguments."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from logging import Logger, getLogger
from typing import BinaryIO, final

from tailr.features.suffix import (
    ByteSink,
    ByteSource,
    CountDirective,
    CountUnit,
    ExtractionResult,
    SourceOpenError,
    SuffixExtractor,
    source_for,
)

SourceFactory = Callable[[str], ByteSource]


class OutcomeKind(str, Enum):
    """Classify how processing a single file argument ended."""

    OK = "ok"
    OPEN_ERROR = "open_error"
    IO_ERROR = "io_error"


@dataclass(slots=True, frozen=True)
class FileOutcome:
    """Result of processing one file argument."""

    argument: str
    kind: OutcomeKind
    result: ExtractionResult | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK


@dataclass(slots=True, frozen=True)
class TailRequest:
    """Parameters describing a tail run."""

    files: Sequence[str]
    directive: CountDirective
    unit: CountUnit = CountUnit.LINES
    quiet: bool = False


def format_header(name: str, *, first: bool) -> bytes:
    """Return the ``==> NAME <==`` banner printed before each file."""

    prefix = b"" if first else b"\n"
    return prefix + b"==> " + os.fsencode(name) + b" <==\n"


@final
class TailService:
    """Application façade wiring sources and the extractor to an output sink."""

    _sink: ByteSink
    _extractor: SuffixExtractor
    _source_factory: SourceFactory
    _logger: Logger

    def __init__(
        self,
        *,
        sink: ByteSink,
        block_size: int,
        spool_max_size: int,
        stdin: BinaryIO | None = None,
        source_factory: SourceFactory | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._sink = sink
        self._logger = logger or getLogger(__name__)
        self._extractor = SuffixExtractor(block_size=block_size, logger=self._logger)

        if source_factory is None:
            def _default_factory(argument: str) -> ByteSource:
                stdin_stream = stdin if stdin is not None else sys.stdin.buffer
                return source_for(argument, stdin=stdin_stream, spool_max_size=spool_max_size)

            source_factory = _default_factory
        self._source_factory = source_factory

    def run(self, request: TailRequest) -> list[FileOutcome]:
        """Process every file in order; failures are recorded and skipped."""

        show_headers = len(request.files) > 1 and not request.quiet
        outcomes: list[FileOutcome] = []
        for index, argument in enumerate(request.files):
            source = self._source_factory(argument)
            try:
                outcomes.append(
                    self._process(
                        source,
                        argument,
                        request,
                        header=format_header(source.name, first=index == 0) if show_headers else None,
                    )
                )
            finally:
                source.close()
        return outcomes

    def _process(
        self,
        source: ByteSource,
        argument: str,
        request: TailRequest,
        *,
        header: bytes | None,
    ) -> FileOutcome:
        try:
            totals = self._extractor.count(source)
        except SourceOpenError as exc:
            self._report(source.name, exc.reason, event="tail.file.open_error")
            return FileOutcome(argument=argument, kind=OutcomeKind.OPEN_ERROR, message=exc.reason)
        except OSError as exc:
            return self._io_failure(source.name, argument, exc)

        if header is not None:
            _ = self._sink.write(header)

        try:
            result = self._extractor.emit(source, request.directive, request.unit, totals, self._sink)
        except BrokenPipeError:
            raise
        except OSError as exc:
            return self._io_failure(source.name, argument, exc)
        finally:
            self._sink.flush()

        return FileOutcome(argument=argument, kind=OutcomeKind.OK, result=result)

    def _io_failure(self, name: str, argument: str, exc: OSError) -> FileOutcome:
        reason = exc.strerror or str(exc)
        self._report(name, reason, event="tail.file.io_error")
        return FileOutcome(argument=argument, kind=OutcomeKind.IO_ERROR, message=reason)

    def _report(self, name: str, reason: str, *, event: str) -> None:
        self._logger.error(
            "%s: %s",
            name,
            reason,
            extra={"tail_event": event, "source_name": name, "error_message": reason},
        )


__all__ = [
    "FileOutcome",
    "OutcomeKind",
    "TailRequest",
    "TailService",
    "format_header",
]
