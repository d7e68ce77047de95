"""Where: src/trackmux/platform/ffmpeg/engine.py
What: ffmpeg adapter exposing a virtual filesystem and a run primitive.
Why: Give the orchestrator an engine whose scratch files live in one private directory.
"""

from __future__ import annotations

import subprocess
import tempfile
import threading
from pathlib import Path
from types import TracebackType
from typing import Final

from trackmux.platform.errors import (
    EngineError,
    EngineLoadCancelledError,
    EngineNotLoadedError,
    EngineRunError,
    VirtualFileNotFoundError,
)
from trackmux.platform.logging import logger

_BASE_ARGS: Final[tuple[str, ...]] = ("-hide_banner", "-nostdin", "-y")
_PROBE_POLL_SECONDS: Final[float] = 0.1


class FFmpegEngine:
    """Drive a local ``ffmpeg`` binary inside a private working directory.

    File names passed to the virtual filesystem methods are bare names
    (``input.flac``); ``run`` executes with that directory as its cwd so
    the same names can be used as ffmpeg arguments.
    """

    def __init__(self, executable: str, *, log: bool = False) -> None:
        self._executable: str = executable
        self._log: bool = log
        self._tempdir: tempfile.TemporaryDirectory[str] | None = None

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def workdir(self) -> Path:
        """Directory backing the virtual filesystem."""

        if self._tempdir is None:
            raise EngineNotLoadedError("ffmpeg engine is not loaded")
        return Path(self._tempdir.name)

    def is_loaded(self) -> bool:
        return self._tempdir is not None

    def load(self, signal: threading.Event | None = None) -> None:
        """Probe the binary and allocate the working directory.

        Does nothing when the engine is already loaded.

        Args:
            signal: Optional cancellation event checked while probing.

        Raises:
            EngineLoadCancelledError: ``signal`` was set before the probe finished.
            EngineError: The binary could not be executed.
        """
        if self._tempdir is not None:
            return
        if signal is not None and signal.is_set():
            raise EngineLoadCancelledError("ffmpeg load cancelled")

        try:
            probe = subprocess.Popen(
                [self._executable, "-hide_banner", "-version"],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as exc:
            raise EngineError(f"cannot execute {self._executable}: {exc}") from exc

        while True:
            try:
                stdout, stderr = probe.communicate(timeout=_PROBE_POLL_SECONDS)
                break
            except subprocess.TimeoutExpired:
                if signal is not None and signal.is_set():
                    probe.kill()
                    _ = probe.communicate()
                    raise EngineLoadCancelledError("ffmpeg load cancelled") from None

        if probe.returncode != 0:
            raise EngineRunError(["-version"], probe.returncode, stderr or "")
        if signal is not None and signal.is_set():
            raise EngineLoadCancelledError("ffmpeg load cancelled")

        self._tempdir = tempfile.TemporaryDirectory(prefix="trackmux-ffmpeg-")
        version_line = (stdout or "").splitlines()[0] if stdout else self._executable
        logger.debug("Loaded %s in %s", version_line, self._tempdir.name)

    def _resolve(self, name: str) -> Path:
        if not name or Path(name).name != name:
            raise ValueError(f"virtual file names must be bare file names: {name!r}")
        return self.workdir / name

    def write_file(self, name: str, data: bytes) -> None:
        _ = self._resolve(name).write_bytes(bytes(data))

    def read_file(self, name: str) -> bytes:
        path = self._resolve(name)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise VirtualFileNotFoundError(f"no such virtual file: {name}") from exc

    def delete_file(self, name: str) -> None:
        path = self._resolve(name)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise VirtualFileNotFoundError(f"no such virtual file: {name}") from exc

    def list_files(self) -> list[str]:
        """Return the names currently present in the virtual filesystem."""

        return sorted(entry.name for entry in self.workdir.iterdir())

    def run(self, *args: str) -> None:
        """Invoke ffmpeg with ``args`` inside the working directory.

        Raises:
            EngineRunError: ffmpeg exited with a non-zero status.
        """
        command = [
            self._executable,
            *_BASE_ARGS,
            "-loglevel",
            "info" if self._log else "error",
            *args,
        ]
        logger.debug("ffmpeg %s", " ".join(args))
        completed = subprocess.run(
            command,
            cwd=self.workdir,
            capture_output=True,
            text=True,
            check=False,
        )
        if self._log and completed.stderr:
            logger.debug(completed.stderr.rstrip())
        if completed.returncode != 0:
            raise EngineRunError(args, completed.returncode, completed.stderr or "")

    def close(self) -> None:
        """Remove the working directory and everything left inside it."""

        if self._tempdir is not None:
            self._tempdir.cleanup()
            self._tempdir = None

    def __enter__(self) -> "FFmpegEngine":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["FFmpegEngine"]
