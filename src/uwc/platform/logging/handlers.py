"""Rich console handler for counting diagnostics.

Where: platform/logging/handlers.py
What: Render structured counting events with icons and colours on stderr.
Why: Keep diagnostic formatting out of the counting pipeline.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CountingRichHandler(RichHandler):
    """Rich handler that renders ``counting_event`` records compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "counting.run.start": ("🚀", "cyan"),
        "counting.run.complete": ("✅", "green"),
        "counting.run.abort": ("❌", "red"),
        "counting.file.start": ("📄", "blue"),
        "counting.file.complete": ("🧮", "green"),
        "counting.file.error": ("⛔", "red"),
        "counting.chunk.complete": ("·", "bright_black"),
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
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_counting_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured counting events with dedicated styling."""

        event = getattr(record, "counting_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        source = getattr(record, "source", None)
        if source is not None:
            _ = body.append(str(source), style=Style(color="white"))
            line = getattr(record, "line", None)
            if isinstance(line, int):
                _ = body.append(f":{line}", style=Style(color="magenta"))
            _ = body.append(" ")

        _ = body.append(record.getMessage())

        details: list[str] = []
        lines_read = getattr(record, "lines_read", None)
        if isinstance(lines_read, int):
            details.append(f"lines={lines_read}")
        files = getattr(record, "files", None)
        if isinstance(files, int):
            details.append(f"files={files}")
        failed = getattr(record, "failed", None)
        if isinstance(failed, int) and failed:
            details.append(f"failed={failed}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            details.append(f"duration={duration:.2f}s")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for counting events."""

        counting_text = self._render_counting_message(record)
        if counting_text is not None:
            return counting_text

        return super().render_message(record, message)


__all__ = ["CountingRichHandler"]
