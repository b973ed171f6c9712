"""Local byte sources: filesystem paths and already-open streams such as stdin."""

from __future__ import annotations

import io
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Final

from ..usecases.ports import ByteSource

STDIN_ARGUMENT: Final[str] = "-"
STDIN_NAME: Final[str] = "standard input"
_COPY_CHUNK: Final[int] = 64 * 1024


class _SpoolReplay(io.BufferedIOBase):
    """Read-only view over a spool; closing the view leaves the spool open."""

    def __init__(self, spool: tempfile.SpooledTemporaryFile[bytes]) -> None:
        super().__init__()
        self._spool = spool
        _ = self._spool.seek(0)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def read(self, size: int | None = -1) -> bytes:
        return self._spool.read(-1 if size is None else size)

    def read1(self, size: int = -1) -> bytes:
        return self.read(size)

    def readline(self, size: int | None = -1) -> bytes:
        return self._spool.readline(-1 if size is None else size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._spool.seek(offset, whence)

    def tell(self) -> int:
        return self._spool.tell()


class _SpoolingReader(io.BufferedIOBase):
    """First-pass view that copies everything it reads into the spool.

    Closing the view drains whatever the reader left unread, so the spool
    always ends up holding the full stream. Read failures surface from
    ``read``/``close`` rather than from ``open``.
    """

    def __init__(
        self,
        stream: BinaryIO,
        spool: tempfile.SpooledTemporaryFile[bytes],
        *,
        owns_stream: bool,
    ) -> None:
        super().__init__()
        self._stream = stream
        self._spool = spool
        self._owns_stream = owns_stream

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def read(self, size: int | None = -1) -> bytes:
        data = self._stream.read(-1 if size is None else size)
        if data:
            _ = self._spool.write(data)
        return data

    def read1(self, size: int = -1) -> bytes:
        return self.read(size)

    def readline(self, size: int | None = -1) -> bytes:
        data = self._stream.readline(-1 if size is None else size)
        if data:
            _ = self._spool.write(data)
        return data

    def close(self) -> None:
        if self.closed:
            return
        try:
            shutil.copyfileobj(self._stream, self._spool, _COPY_CHUNK)
        finally:
            if self._owns_stream:
                self._stream.close()
            super().close()


class StreamSource(ByteSource):
    """Source backed by a one-shot stream, spooled so it can be read twice.

    The first ``open`` returns a reader that copies the wrapped stream into a
    ``SpooledTemporaryFile`` (in memory up to ``spool_max_size`` bytes, on disk
    beyond that) as it is consumed; later calls replay the spool from the start.
    """

    _name: str
    _stream: BinaryIO
    _spool_max_size: int
    _owns_stream: bool
    _spool: tempfile.SpooledTemporaryFile[bytes] | None

    def __init__(
        self,
        name: str,
        stream: BinaryIO,
        *,
        spool_max_size: int,
        owns_stream: bool = False,
    ) -> None:
        self._name = name
        self._stream = stream
        self._spool_max_size = spool_max_size
        self._owns_stream = owns_stream
        self._spool = None

    @property
    def name(self) -> str:
        return self._name

    def open(self) -> BinaryIO:
        if self._spool is not None:
            return _SpoolReplay(self._spool)

        self._spool = tempfile.SpooledTemporaryFile(max_size=self._spool_max_size, mode="w+b")
        return _SpoolingReader(self._stream, self._spool, owns_stream=self._owns_stream)

    def close(self) -> None:
        if self._spool is not None:
            self._spool.close()
            self._spool = None


class FileSource(ByteSource):
    """Source backed by a filesystem path, reopened for every pass.

    Paths that cannot seek (named pipes, character devices) are spooled during
    the first pass since a second open would not see the same data.
    """

    _path: Path
    _name: str
    _spool_max_size: int
    _replay: StreamSource | None

    def __init__(self, path: Path | str, *, spool_max_size: int) -> None:
        self._path = Path(path)
        self._name = str(path)
        self._spool_max_size = spool_max_size
        self._replay = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    def open(self) -> BinaryIO:
        if self._replay is not None:
            return self._replay.open()

        stream = open(self._path, "rb")
        if stream.seekable():
            return stream

        self._replay = StreamSource(
            self._name,
            stream,
            spool_max_size=self._spool_max_size,
            owns_stream=True,
        )
        return self._replay.open()

    def close(self) -> None:
        if self._replay is not None:
            self._replay.close()
            self._replay = None


def source_for(argument: str, *, stdin: BinaryIO, spool_max_size: int) -> FileSource | StreamSource:
    """Build the source for a command line file argument (``-`` is stdin)."""

    if argument == STDIN_ARGUMENT:
        return StreamSource(STDIN_NAME, stdin, spool_max_size=spool_max_size)
    return FileSource(argument, spool_max_size=spool_max_size)


__all__ = ["FileSource", "STDIN_ARGUMENT", "STDIN_NAME", "StreamSource", "source_for"]
