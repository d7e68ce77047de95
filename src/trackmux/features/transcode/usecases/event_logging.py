"""
Summary: Emit structured transcode events through the shared logger.
Why: Attach the processing_event extra the console handler renders.
"""

from __future__ import annotations

from trackmux.platform.logging import logger

from .processing_types import ProcessingEvent


def log_event(
    level: int,
    event: ProcessingEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Log ``message`` tagged with ``event`` and extra ``context`` fields."""

    logger.log(
        level,
        message,
        *message_args,
        extra={"processing_event": event.value, **context},
    )


__all__ = ["log_event"]
