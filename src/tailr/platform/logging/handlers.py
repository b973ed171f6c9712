"""Rich console handler for tailr diagnostics.

Where: platform/logging/handlers.py
What: Render per-file failure events as compact ``tailr: NAME: reason`` lines.
Why: Keep diagnostics on stderr readable without touching the data stream.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

PROGRAM_NAME = "tailr"


class TailRichHandler(RichHandler):
    """Rich handler that renders structured tail events in coreutils style."""

    _EVENT_STYLES: ClassVar[dict[str, str]] = {
        "tail.file.open_error": "red",
        "tail.file.io_error": "red",
        "tail.count.invalid": "red",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        # File names may contain square brackets.
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _style_path_string(path_string: str, color: str) -> Text:
        """Highlight path separators inside ``path_string``."""

        text = Text()
        for char in path_string:
            if char in {"/", "\\"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color=color, bold=True))
        return text

    def _render_tail_event(self, record: logging.LogRecord) -> Text | None:
        """Render ``tail.*`` events; return ``None`` for ordinary records."""

        event = getattr(record, "tail_event", None)
        if not isinstance(event, str):
            return None

        color = self._EVENT_STYLES.get(event, "yellow")
        text = Text()
        _ = text.append(f"{PROGRAM_NAME}: ", style=Style(color=color))

        source_name = getattr(record, "source_name", None)
        if source_name:
            _ = text.append_text(self._style_path_string(str(source_name), color))
            _ = text.append(": ", style=Style(color=color))

        if event == "tail.count.invalid":
            label = getattr(record, "count_label", "count")
            value = getattr(record, "count_value", "")
            _ = text.append(f"illegal {label} count -- {value}", style=Style(color=color))
            return text

        reason = getattr(record, "error_message", None)
        _ = text.append(str(reason) if reason else record.getMessage(), style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for tail events."""

        tail_text = self._render_tail_event(record)
        if tail_text is not None:
            return tail_text

        return super().render_message(record, message)


__all__ = ["PROGRAM_NAME", "TailRichHandler"]
