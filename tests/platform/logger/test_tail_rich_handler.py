"""Tests for the ``TailRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from tailr.platform.logging import TailRichHandler, setup_logger


def _make_handler() -> TailRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return TailRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with tail extras for testing."""

    record = logging.LogRecord(
        name="tailr",
        level=logging.ERROR,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_open_error_renders_program_name_and_path() -> None:
    handler = _make_handler()
    record = _build_record(
        tail_event="tail.file.open_error",
        source_name="/var/log/missing [1].log",
        error_message="No such file or directory",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "tailr: /var/log/missing [1].log: No such file or directory"


def test_invalid_count_renders_illegal_count_message() -> None:
    handler = _make_handler()
    record = _build_record(
        tail_event="tail.count.invalid",
        count_label="byte",
        count_value="foo",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "tailr: illegal byte count -- foo"


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record("plain message")

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_markup_is_disabled_for_file_names() -> None:
    handler = _make_handler()
    record = _build_record("[bold]x[/bold]")

    rendered = handler.render_message(record, "[bold]x[/bold]")

    assert isinstance(rendered, Text)
    assert rendered.plain == "[bold]x[/bold]"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tailr.log"

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)
    try:
        logger.debug("written to file only")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
        assert any(isinstance(h, TailRichHandler) for h in logger.handlers)
    finally:
        _ = setup_logger()


def test_setup_logger_is_idempotent() -> None:
    first = setup_logger()
    second = setup_logger()

    assert first is second
    assert len(second.handlers) == 1
