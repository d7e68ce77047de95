"""Tests for the ``TrackmuxRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from trackmux.platform.logging import TrackmuxRichHandler


def _make_handler() -> TrackmuxRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return TrackmuxRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with processing extras for testing."""

    record = logging.LogRecord(
        name="trackmux",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="plain message",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_labels_event_with_details() -> None:
    """Structured events render their label and known detail fields."""

    handler = _make_handler()
    record = _build_record(
        processing_event="transcode.complete",
        codec="FLAC",
        passes=2,
        size_bytes=1024,
        reason=None,
    )

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Done" in plain
    assert "[codec=FLAC, passes=2, size_bytes=1024]" in plain
    assert "reason=" not in plain


def test_render_message_truncates_long_paths() -> None:
    """Absolute paths are abbreviated to their last segments."""

    handler = _make_handler()
    record = _build_record(
        processing_event="transcode.complete",
        source_path="/home/user/downloads/qobuz/Miles Davis/Kind of Blue/03.flac",
        target_path="/srv/library/Miles Davis/Kind of Blue/03.m4a",
    )

    plain = handler.render_message(record, "").plain  # type: ignore[union-attr]

    assert "…/Miles Davis/Kind of Blue/03.flac → …/Miles Davis/Kind of Blue/03.m4a" in plain
    assert "/home/user" not in plain


def test_render_message_handles_windows_paths() -> None:
    """Windows-style paths keep their backslash separators."""

    handler = _make_handler()
    record = _build_record(
        processing_event="hash.repair.complete",
        source_path="C:\\music\\Artist\\Album\\Disc\\Track.flac",
    )

    plain = handler.render_message(record, "").plain  # type: ignore[union-attr]

    assert "Album\\Disc\\Track.flac" in plain
    assert "C:\\music" not in plain


def test_unknown_event_falls_back_to_event_name() -> None:
    handler = _make_handler()
    record = _build_record(processing_event="custom.event")

    plain = handler.render_message(record, "").plain  # type: ignore[union-attr]

    assert "custom.event" in plain


def test_plain_records_use_default_rendering() -> None:
    handler = _make_handler()
    rendered = handler.render_message(_build_record(), "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"
