"""
Summary: Rewrite a FLAC stream through the hash worker to repair its MD5 signature.
Why: Wrap the worker's message protocol in a single-resolution future.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from concurrent.futures import Future
from typing import Final

from trackmux.platform.errors import HashWorkerError

from .event_logging import log_event
from .ports import HashWorkerPort, StatusReporter, WorkerMessage
from .processing_types import ProcessingEvent

HASH_STATUS: Final[str] = "Fixing MD5 hash..."
FLAC_INPUT_NAME: Final[str] = "input.flac"
FLAC_OUTPUT_NAME: Final[str] = "output.flac"
FLAC_MIME: Final[str] = "audio/flac"

ProgressCallback = Callable[[int], None]


def _default_worker() -> HashWorkerPort:
    from trackmux.platform.flac import FlacWorker

    return FlacWorker()


def build_encode_message(track_buffer: bytes) -> WorkerMessage:
    """Return the ``encode`` command re-encoding ``input.flac`` to ``output.flac``."""

    return {
        "command": "encode",
        "args": [FLAC_INPUT_NAME, "-o", FLAC_OUTPUT_NAME],
        "outData": {FLAC_OUTPUT_NAME: {"MIME": FLAC_MIME}},
        "fileData": {FLAC_INPUT_NAME: bytes(track_buffer)},
    }


def scale_progress(current: float, total: float) -> int | None:
    """Return ``current / total`` as a floored percentage, or ``None`` without a total."""

    if not total:
        return None
    return math.floor(current / total * 100)


def fix_md5_hash(
    track_buffer: bytes,
    *,
    progress: ProgressCallback | None = None,
    status: StatusReporter | None = None,
    worker_factory: Callable[[], HashWorkerPort] = _default_worker,
) -> Future[bytes]:
    """Submit ``track_buffer`` to a new hash worker and return a pending result.

    The future resolves once, with the blob of the first file in the worker's
    ``done`` reply. It has no timeout and cannot be cancelled; dropping it
    leaves the worker running.
    """
    result: Future[bytes] = Future()
    if status is not None:
        status(HASH_STATUS, 0)
    log_event(
        logging.DEBUG,
        ProcessingEvent.HASH_REPAIR_START,
        "Fixing MD5 hash (%d bytes)",
        len(track_buffer),
        size_bytes=len(track_buffer),
    )

    def _on_message(message: WorkerMessage) -> None:
        if result.done() or not isinstance(message, dict):
            return
        reply = message.get("reply")
        values = message.get("values")

        if reply == "progress":
            if not isinstance(values, (list, tuple)) or len(values) < 2:
                return
            percent = scale_progress(values[0], values[1])
            if percent is None:
                return
            if progress is not None:
                progress(percent)
            if status is not None:
                status(HASH_STATUS, percent)
        elif reply == "done":
            files = values if isinstance(values, dict) else {}
            for name, payload in files.items():
                blob = bytes(payload["blob"])
                log_event(
                    logging.DEBUG,
                    ProcessingEvent.HASH_REPAIR_COMPLETE,
                    "MD5 hash fixed for %s",
                    name,
                    size_bytes=len(blob),
                )
                result.set_result(blob)
                return
            result.set_exception(HashWorkerError("worker finished without output files"))
        elif reply == "error":
            result.set_exception(HashWorkerError(str(values or "hash worker failed")))

    worker = worker_factory()
    worker.on_message = _on_message
    worker.post_message(build_encode_message(track_buffer))
    return result


__all__ = [
    "FLAC_INPUT_NAME",
    "FLAC_OUTPUT_NAME",
    "HASH_STATUS",
    "ProgressCallback",
    "build_encode_message",
    "fix_md5_hash",
    "scale_progress",
]
