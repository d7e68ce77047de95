"""Where: src/trackmux/platform/ffmpeg/bootstrap.py
What: Construct and load ffmpeg engines on demand.
Why: Callers receive an explicit engine instance instead of a process-wide global.
"""

from __future__ import annotations

import logging
import shutil
import threading
from typing import Protocol, TypeVar

from trackmux.config.settings import FFMPEG_EXECUTABLE
from trackmux.platform.logging import logger

from .engine import FFmpegEngine


class LoadableEngine(Protocol):
    """Minimal load-state contract shared by engine implementations."""

    def is_loaded(self) -> bool:
        ...

    def load(self, signal: threading.Event | None = None) -> None:
        ...


EngineT = TypeVar("EngineT", bound=LoadableEngine)


def create_engine(executable: str | None = None, *, log: bool = False) -> FFmpegEngine | None:
    """Return a new engine, or ``None`` when no ffmpeg binary is available."""

    candidate = executable or FFMPEG_EXECUTABLE
    resolved = shutil.which(candidate)
    if resolved is None:
        logger.debug("ffmpeg binary not found: %s", candidate)
        return None
    return FFmpegEngine(resolved, log=log)


def load_engine(engine: EngineT, signal: threading.Event | None = None) -> EngineT | None:
    """Load ``engine`` unless it is already loaded.

    Returns:
        The engine when a load was performed, ``None`` when it was already loaded.
    """
    if engine.is_loaded():
        return None
    engine.load(signal)
    logger.log(
        logging.DEBUG,
        "Engine loaded",
        extra={"processing_event": "engine.load"},
    )
    return engine


__all__ = ["LoadableEngine", "create_engine", "load_engine"]
