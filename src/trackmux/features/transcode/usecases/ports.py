"""
Summary: Ports defining the transcode orchestrator's external collaborators.
Why: Decouple use cases from ffmpeg, flac and HTTP so tests and swaps stay simple.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from ..domain.metadata_sidecar import MetadataFormatter

WorkerMessage = dict[str, Any]


@runtime_checkable
class TranscodeEnginePort(Protocol):
    """Port for an engine exposing a virtual filesystem and a run primitive."""

    def write_file(self, name: str, data: bytes) -> None:
        """Store ``data`` under the virtual file ``name``."""
        ...

    def run(self, *args: str) -> None:
        """Execute one engine operation with ``args``."""
        ...

    def read_file(self, name: str) -> bytes:
        """Return the contents of the virtual file ``name``."""
        ...

    def delete_file(self, name: str) -> None:
        """Remove the virtual file ``name``."""
        ...

    def is_loaded(self) -> bool:
        """Report whether ``load`` has completed."""
        ...

    def load(self, signal: threading.Event | None = None) -> None:
        """Prepare the engine, aborting when ``signal`` is set."""
        ...


@runtime_checkable
class HashWorkerPort(Protocol):
    """Port for a message-driven hash correction worker."""

    on_message: Callable[[WorkerMessage], None] | None

    def post_message(self, message: WorkerMessage) -> None:
        """Send a command message to the worker."""
        ...

    def terminate(self) -> None:
        """Stop the worker."""
        ...


@runtime_checkable
class ArtworkProviderPort(Protocol):
    """Port for downloading and resizing album art."""

    def fetch_resized(self, url: str | None, size: int, quality: float) -> bytes | None:
        """Return JPEG bytes, or ``None`` when no usable artwork exists."""
        ...


class StatusReporter(Protocol):
    """Signature for UI status callbacks."""

    def __call__(self, description: str, progress: int | None = None) -> None:
        ...


__all__ = [
    "ArtworkProviderPort",
    "HashWorkerPort",
    "MetadataFormatter",
    "StatusReporter",
    "TranscodeEnginePort",
    "WorkerMessage",
]
