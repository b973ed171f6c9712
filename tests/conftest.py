"""Shared pytest fixtures for the tailr test-suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary location and reset the singleton."""

    import tailr.config.config as config_module

    config_path = tmp_path / "config" / "tailr.toml"
    monkeypatch.setenv("TAILR_CONFIG", str(config_path))
    monkeypatch.setenv("TAILR_LOG_DIR", str(tmp_path / "logs"))

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_path
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes ``content`` to ``tmp_path / name``."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def five_lines(write_file: Callable[[str, bytes], Path]) -> Path:
    """A file holding ``one`` through ``five``, newline terminated."""

    return write_file("five.txt", b"one\ntwo\nthree\nfour\nfive\n")
