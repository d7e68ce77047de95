"""Logger bootstrap for trackmux.

Where: platform/logging/config.py
What: Build the shared ``trackmux`` logger with a Rich console and an optional rotating file.
Why: Library callers get console output only; the CLI opts into the log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final, override

from rich.console import Console

from trackmux.config.paths import default_log_file

from .handlers import TrackmuxRichHandler

LOGGER_NAME: Final[str] = "trackmux"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = (
    "%(asctime)s %(levelname)-8s %(name)s [%(processing_event)s] %(message)s"
)
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


class EventFileFormatter(logging.Formatter):
    """Plain-text formatter whose lines always carry a processing event column."""

    def __init__(self) -> None:
        super().__init__(_FILE_FORMAT)

    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "processing_event", None) is None:
            # Copy so other handlers never see the placeholder event.
            record = logging.makeLogRecord({**record.__dict__, "processing_event": "-"})
        return super().format(record)


def _console_handler(level: int) -> TrackmuxRichHandler:
    handler = TrackmuxRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(EventFileFormatter())
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``trackmux`` logger.

    Existing handlers are closed and replaced, so repeated calls are safe.

    Args:
        log_file: Rotating log destination; no file handler when ``None``.
        console_level: Minimum level shown on stderr.
        file_level: Minimum level written to ``log_file``.

    Returns:
        The configured logger.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    configured.addHandler(_console_handler(console_level))
    if log_file is not None:
        configured.addHandler(_file_handler(Path(log_file), file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "EventFileFormatter", "setup_logger", "logger"]
