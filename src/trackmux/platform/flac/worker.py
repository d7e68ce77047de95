"""Where: src/trackmux/platform/flac/worker.py
What: Message-driven worker that re-encodes FLAC data with the ``flac`` CLI.
Why: Recompute the STREAMINFO MD5 on a background thread behind a message protocol.
"""

from __future__ import annotations

import re
import shutil
import subprocess
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Final, IO

from trackmux.config.settings import FLAC_EXECUTABLE
from trackmux.platform.logging import logger

WorkerMessage = dict[str, Any]
MessageHandler = Callable[[WorkerMessage], None]

_PROGRESS_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d{1,3})% complete")
_LINE_SPLIT: Final[re.Pattern[str]] = re.compile(r"[\r\n]")
_READ_CHUNK: Final[int] = 256


class FlacWorker:
    """Run ``flac`` commands on a daemon thread and reply through ``on_message``.

    Inbound messages use ``{"command": "encode", "args": [...],
    "outData": {name: {"MIME": ...}}, "fileData": {name: bytes}}``.
    Replies are ``{"reply": "progress", "values": [current, total]}``,
    ``{"reply": "done", "values": {name: {"blob": bytes, "MIME": ...}}}`` or
    ``{"reply": "error", "values": "<message>"}``.
    """

    def __init__(self, executable: str | None = None) -> None:
        self._executable: str = executable or FLAC_EXECUTABLE
        self.on_message: MessageHandler | None = None
        self._thread: threading.Thread | None = None
        self._process: subprocess.Popen[bytes] | None = None
        self._terminated: threading.Event = threading.Event()

    def post_message(self, message: WorkerMessage) -> None:
        """Queue ``message`` for processing on the worker thread."""

        if self._terminated.is_set():
            raise RuntimeError("worker has been terminated")
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker is busy with a previous message")
        self._thread = threading.Thread(
            target=self._handle,
            args=(message,),
            name="flac-worker",
            daemon=True,
        )
        self._thread.start()

    def terminate(self) -> None:
        """Stop replying and kill a running ``flac`` process."""

        self._terminated.set()
        process = self._process
        if process is not None and process.poll() is None:
            process.kill()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _emit(self, message: WorkerMessage) -> None:
        if self._terminated.is_set():
            return
        handler = self.on_message
        if handler is not None:
            handler(message)

    def _handle(self, message: WorkerMessage) -> None:
        try:
            command = message.get("command")
            if command != "encode":
                raise ValueError(f"unsupported worker command: {command!r}")
            self._encode(message)
        except Exception as exc:
            logger.debug("flac worker failed: %s", exc)
            self._emit({"reply": "error", "values": str(exc)})

    def _encode(self, message: WorkerMessage) -> None:
        args = [str(arg) for arg in message.get("args", [])]
        out_data: dict[str, dict[str, Any]] = dict(message.get("outData") or {})
        file_data: dict[str, bytes] = dict(message.get("fileData") or {})

        executable = shutil.which(self._executable)
        if executable is None:
            raise FileNotFoundError(f"flac binary not found: {self._executable}")

        with tempfile.TemporaryDirectory(prefix="trackmux-flac-") as workdir:
            root = Path(workdir)
            for name, data in file_data.items():
                _ = (root / Path(name).name).write_bytes(bytes(data))

            process = subprocess.Popen(
                [executable, "--force", *args],
                cwd=root,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
            self._process = process
            try:
                assert process.stderr is not None
                tail = self._pump_progress(process.stderr)
                returncode = process.wait()
            finally:
                # Reap flac before its working directory is removed.
                if process.poll() is None:
                    process.kill()
                _ = process.wait()
                self._process = None

            if returncode != 0:
                raise RuntimeError(f"flac exited with status {returncode}: {tail}")

            values: dict[str, dict[str, Any]] = {}
            for name, spec in out_data.items():
                blob = (root / Path(name).name).read_bytes()
                values[name] = {"blob": blob, **dict(spec)}
        self._emit({"reply": "done", "values": values})

    def _pump_progress(self, stream: IO[bytes]) -> str:
        """Forward percentage lines from ``stream`` and return the last line seen."""

        buffer = ""
        last_line = ""
        last_percent = -1
        read = getattr(stream, "read1", stream.read)
        while True:
            chunk = read(_READ_CHUNK)
            if not chunk:
                break
            buffer += chunk.decode("utf-8", errors="replace")
            *lines, buffer = _LINE_SPLIT.split(buffer)
            for line in lines:
                if not line.strip():
                    continue
                last_line = line.strip()
                match = _PROGRESS_PATTERN.search(line)
                if match is None:
                    continue
                percent = int(match.group(1))
                if percent != last_percent:
                    last_percent = percent
                    self._emit({"reply": "progress", "values": [percent, 100]})
        return buffer.strip() or last_line


__all__ = ["FlacWorker", "MessageHandler", "WorkerMessage"]
