"""Tests for the local byte source adapters."""

from __future__ import annotations

import io
import os
import threading
from collections.abc import Callable
from pathlib import Path

import pytest

from tailr.features.suffix.adapters import (
    STDIN_NAME,
    FileSource,
    StreamSource,
    source_for,
)


class _OneShot(io.BytesIO):
    """BytesIO that cannot seek, standing in for standard input."""

    def seekable(self) -> bool:
        return False


def test_file_source_reopens_for_every_pass(write_file: Callable[[str, bytes], Path]) -> None:
    path = write_file("data.txt", b"abc\n")
    source = FileSource(path, spool_max_size=1024)

    with source.open() as first:
        assert first.read() == b"abc\n"
    with source.open() as second:
        assert second.read() == b"abc\n"

    assert source.name == str(path)
    assert source.path == path


def test_file_source_missing_path_raises_os_error(tmp_path: Path) -> None:
    source = FileSource(tmp_path / "missing.txt", spool_max_size=1024)

    with pytest.raises(FileNotFoundError):
        _ = source.open()


def test_stream_source_replays_spooled_data() -> None:
    stdin = _OneShot(b"line1\nline2\n")
    source = StreamSource(STDIN_NAME, stdin, spool_max_size=4)

    with source.open() as first:
        assert first.read() == b"line1\nline2\n"
    with source.open() as second:
        assert second.seekable()
        _ = second.seek(6)
        assert second.read() == b"line2\n"

    # The caller's stream is drained once and left open.
    assert not stdin.closed
    source.close()


def test_stream_source_handles_empty_input() -> None:
    source = StreamSource(STDIN_NAME, _OneShot(b""), spool_max_size=0)

    with source.open() as stream:
        assert stream.read() == b""
    source.close()


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes unavailable")
def test_file_source_spools_named_pipes(tmp_path: Path) -> None:
    """A FIFO can only be read once, so its data is replayed from a spool."""

    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)

    def _feed() -> None:
        with open(fifo, "wb") as writer:
            _ = writer.write(b"a\nb\n")

    feeder = threading.Thread(target=_feed)
    feeder.start()

    source = FileSource(fifo, spool_max_size=1024)
    try:
        with source.open() as first:
            assert first.read() == b"a\nb\n"
        with source.open() as second:
            assert second.read() == b"a\nb\n"
    finally:
        source.close()
        feeder.join(timeout=5)


def test_source_for_maps_dash_to_stdin(tmp_path: Path) -> None:
    stdin = _OneShot(b"x")

    stdin_source = source_for("-", stdin=stdin, spool_max_size=16)
    file_source = source_for(str(tmp_path / "f"), stdin=stdin, spool_max_size=16)

    assert isinstance(stdin_source, StreamSource)
    assert stdin_source.name == STDIN_NAME
    assert isinstance(file_source, FileSource)


class _FailingPipe(io.RawIOBase):
    """Non-seekable stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, b: bytearray) -> int:  # type: ignore[override]
        raise OSError(5, "Input/output error")


def test_stream_source_open_does_not_read() -> None:
    source = StreamSource("broken", _FailingPipe(), spool_max_size=16)

    stream = source.open()
    with pytest.raises(OSError) as excinfo:
        _ = stream.read(4)

    assert excinfo.value.errno == 5
    with pytest.raises(OSError):
        stream.close()
    assert stream.closed
    source.close()


def test_partial_first_pass_still_spools_everything() -> None:
    source = StreamSource(STDIN_NAME, _OneShot(b"abcdef\n"), spool_max_size=4)

    with source.open() as first:
        assert first.read(2) == b"ab"
        assert first.readline() == b"cdef\n"
    with source.open() as second:
        assert second.read() == b"abcdef\n"
    source.close()


def test_unread_rest_is_drained_on_close() -> None:
    source = StreamSource(STDIN_NAME, _OneShot(b"1\n2\n3\n"), spool_max_size=0)

    with source.open() as first:
        assert first.readline() == b"1\n"
    with source.open() as second:
        assert second.read() == b"1\n2\n3\n"
    source.close()
