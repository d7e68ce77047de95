"""Where: src/trackmux/platform/logging/handlers.py
What: Rich console handler rendering structured transcode events.
Why: Keep event formatting out of the orchestration code that emits it.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TrackmuxRichHandler(RichHandler):
    """Rich handler that renders ``processing_event`` records with icons."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "engine.load": ("⚙️", "cyan"),
        "transcode.reencode.start": ("🎛️", "blue"),
        "transcode.reencode.complete": ("🎚️", "green"),
        "transcode.reencode.skip": ("↪️", "yellow"),
        "transcode.metadata.start": ("🏷️", "blue"),
        "transcode.metadata.skip": ("↪️", "yellow"),
        "transcode.artwork.attach": ("🖼️", "magenta"),
        "transcode.artwork.skip": ("↪️", "yellow"),
        "transcode.complete": ("✅", "green"),
        "hash.repair.start": ("🔁", "blue"),
        "hash.repair.complete": ("✅", "green"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "engine.load": "Engine loaded",
        "transcode.reencode.start": "Re-encoding",
        "transcode.reencode.complete": "Re-encoded",
        "transcode.reencode.skip": "Re-encode skipped",
        "transcode.metadata.start": "Applying metadata",
        "transcode.metadata.skip": "Metadata skipped",
        "transcode.artwork.attach": "Attaching artwork",
        "transcode.artwork.skip": "Artwork skipped",
        "transcode.complete": "Done",
        "hash.repair.start": "Fixing MD5 hash",
        "hash.repair.complete": "MD5 hash fixed",
    }
    _DETAIL_KEYS: ClassVar[tuple[str, ...]] = (
        "codec",
        "encoder",
        "bitrate",
        "passes",
        "reason",
        "size_bytes",
    )
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` with coloured separators, keeping the last segments."""

        pure_path: PurePath = (
            PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        )
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        display = separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + display
        elif pure_path.anchor:
            display = pure_path.anchor + display

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured processing events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append(" ")
            _ = body.append_text(self._format_path(str(source_path)))
        if target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        details: list[str] = []
        for key in self._DETAIL_KEYS:
            value = getattr(record, key, None)
            if value is None or value == "":
                continue
            details.append(f"{key}={value}")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for processing events."""

        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text

        return super().render_message(record, message)


__all__ = ["TrackmuxRichHandler"]
