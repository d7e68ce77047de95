"""
Summary: In-memory doubles for the transcode engine, hash worker and artwork ports.
Why: Exercise orchestration without ffmpeg, flac or network access.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from types import TracebackType
from typing import Any

from trackmux.platform.errors import EngineRunError, VirtualFileNotFoundError

WorkerMessage = dict[str, Any]


class FakeEngine:
    """Record engine calls against an in-memory virtual filesystem.

    Every ``run`` writes ``b"run<N>:<output name>"`` to the file named by its
    last argument so tests can tell which pass produced a result.
    """

    def __init__(self, *, loaded: bool = True, fail_on_run: int | None = None) -> None:
        self.files: dict[str, bytes] = {}
        self.writes: list[tuple[str, bytes]] = []
        self.runs: list[tuple[str, ...]] = []
        self.deleted: list[str] = []
        self.loaded: bool = loaded
        self.load_signals: list[threading.Event | None] = []
        self.fail_on_run: int | None = fail_on_run
        self.closed: bool = False

    def write_file(self, name: str, data: bytes) -> None:
        self.files[name] = bytes(data)
        self.writes.append((name, bytes(data)))

    def run(self, *args: str) -> None:
        self.runs.append(tuple(args))
        if self.fail_on_run == len(self.runs):
            raise EngineRunError(args, 1, "simulated failure")
        output = args[-1]
        self.files[output] = f"run{len(self.runs)}:{output}".encode()

    def read_file(self, name: str) -> bytes:
        try:
            return self.files[name]
        except KeyError:
            raise VirtualFileNotFoundError(name) from None

    def delete_file(self, name: str) -> None:
        if name not in self.files:
            raise VirtualFileNotFoundError(name)
        del self.files[name]
        self.deleted.append(name)

    def is_loaded(self) -> bool:
        return self.loaded

    def load(self, signal: threading.Event | None = None) -> None:
        self.load_signals.append(signal)
        self.loaded = True

    def written(self, name: str) -> bytes:
        """Return the last bytes written under ``name``."""

        for written_name, data in reversed(self.writes):
            if written_name == name:
                return data
        raise KeyError(name)

    def __enter__(self) -> "FakeEngine":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.closed = True


class FakeWorker:
    """Reply to ``post_message`` synchronously with scripted messages."""

    def __init__(self, replies: Iterable[WorkerMessage]) -> None:
        self.replies: list[WorkerMessage] = list(replies)
        self.posted: list[WorkerMessage] = []
        self.on_message: Callable[[WorkerMessage], None] | None = None
        self.terminated: bool = False

    def post_message(self, message: WorkerMessage) -> None:
        self.posted.append(message)
        for reply in self.replies:
            assert self.on_message is not None
            self.on_message(reply)

    def terminate(self) -> None:
        self.terminated = True


class StubArtworkProvider:
    """Return a fixed artwork payload and record requests."""

    def __init__(self, payload: bytes | None) -> None:
        self.payload: bytes | None = payload
        self.calls: list[tuple[str | None, int, float]] = []

    def fetch_resized(self, url: str | None, size: int, quality: float) -> bytes | None:
        self.calls.append((url, size, quality))
        return self.payload


class StatusRecorder:
    """Collect status callbacks."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int | None]] = []

    def __call__(self, description: str, progress: int | None = None) -> None:
        self.calls.append((description, progress))

    @property
    def descriptions(self) -> list[str]:
        return [description for description, _ in self.calls]
