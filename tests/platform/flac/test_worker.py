"""Tests for the flac hash worker."""

from __future__ import annotations

import io
import threading
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from trackmux.platform.flac.worker import FlacWorker

POPEN = "trackmux.platform.flac.worker.subprocess.Popen"
WHICH = "trackmux.platform.flac.worker.shutil.which"

ENCODE: dict[str, Any] = {
    "command": "encode",
    "args": ["input.flac", "-o", "output.flac"],
    "outData": {"output.flac": {"MIME": "audio/flac"}},
    "fileData": {"input.flac": b"broken"},
}


def _collect(worker: FlacWorker) -> tuple[list[dict[str, Any]], threading.Event]:
    replies: list[dict[str, Any]] = []
    finished = threading.Event()

    def handler(message: dict[str, Any]) -> None:
        replies.append(message)
        if message["reply"] in ("done", "error"):
            finished.set()

    worker.on_message = handler
    return replies, finished


def _fake_flac(stderr: bytes, returncode: int = 0, output: bytes | None = b"fixed"):
    seen: dict[str, Any] = {}

    def popen(command: list[str], cwd: Path, **kwargs: Any) -> MagicMock:
        seen["command"] = command
        seen["input"] = (Path(cwd) / "input.flac").read_bytes()
        if output is not None:
            _ = (Path(cwd) / "output.flac").write_bytes(output)
        process = MagicMock()
        process.stderr = io.BytesIO(stderr)
        process.wait.return_value = returncode
        return process

    return popen, seen


def test_encode_reports_progress_then_done(mocker: MockerFixture) -> None:
    _ = mocker.patch(WHICH, return_value="/usr/bin/flac")
    popen, seen = _fake_flac(
        b"input.flac: 10% complete, ratio=0.5\rinput.flac: 10% complete\r"
        b"input.flac: 55% complete\rinput.flac: wrote 100 bytes, ratio=0.5\n"
    )
    _ = mocker.patch(POPEN, side_effect=popen)
    worker = FlacWorker()
    replies, finished = _collect(worker)

    worker.post_message(ENCODE)
    assert finished.wait(5)
    worker.join(5)

    assert seen["command"] == ["/usr/bin/flac", "--force", "input.flac", "-o", "output.flac"]
    assert seen["input"] == b"broken"
    assert replies == [
        {"reply": "progress", "values": [10, 100]},
        {"reply": "progress", "values": [55, 100]},
        {"reply": "done", "values": {"output.flac": {"blob": b"fixed", "MIME": "audio/flac"}}},
    ]


def test_nonzero_exit_replies_error(mocker: MockerFixture) -> None:
    _ = mocker.patch(WHICH, return_value="/usr/bin/flac")
    popen, _seen = _fake_flac(b"input.flac: ERROR: not a FLAC file\n", returncode=1, output=None)
    _ = mocker.patch(POPEN, side_effect=popen)
    worker = FlacWorker()
    replies, finished = _collect(worker)

    worker.post_message(ENCODE)
    assert finished.wait(5)

    assert replies[-1]["reply"] == "error"
    assert "status 1" in replies[-1]["values"]
    assert "not a FLAC file" in replies[-1]["values"]


def test_missing_binary_replies_error(mocker: MockerFixture) -> None:
    _ = mocker.patch(WHICH, return_value=None)
    popen = mocker.patch(POPEN)
    worker = FlacWorker("flac-missing")
    replies, finished = _collect(worker)

    worker.post_message(ENCODE)
    assert finished.wait(5)

    popen.assert_not_called()
    assert replies == [{"reply": "error", "values": "flac binary not found: flac-missing"}]


def test_unknown_command_replies_error() -> None:
    worker = FlacWorker()
    replies, finished = _collect(worker)

    worker.post_message({"command": "decode"})
    assert finished.wait(5)

    assert replies[0]["reply"] == "error"
    assert "decode" in replies[0]["values"]


def test_terminated_worker_is_silent_and_rejects_messages() -> None:
    worker = FlacWorker()
    replies, _finished = _collect(worker)

    worker.terminate()

    with pytest.raises(RuntimeError):
        worker.post_message(ENCODE)
    assert replies == []


def test_failing_handler_kills_and_reaps_flac(mocker: MockerFixture) -> None:
    _ = mocker.patch(WHICH, return_value="/usr/bin/flac")
    process = MagicMock()
    process.stderr = io.BytesIO(b"input.flac: 10% complete\r")
    process.poll.return_value = None
    _ = mocker.patch(POPEN, return_value=process)
    worker = FlacWorker()
    replies: list[dict[str, Any]] = []
    finished = threading.Event()

    def handler(message: dict[str, Any]) -> None:
        if message["reply"] == "progress":
            raise RuntimeError("progress display closed")
        replies.append(message)
        finished.set()

    worker.on_message = handler
    worker.post_message(ENCODE)
    assert finished.wait(5)
    worker.join(5)

    assert replies == [{"reply": "error", "values": "progress display closed"}]
    process.kill.assert_called_once_with()
    process.wait.assert_called()
    assert worker._process is None  # pyright: ignore[reportPrivateUsage]


class _GatedStream:
    """stderr stand-in that blocks until the test opens the gate."""

    def __init__(self, gate: threading.Event) -> None:
        self._gate = gate

    def read1(self, _size: int) -> bytes:
        _ = self._gate.wait(5)
        return b""


def test_second_message_rejected_while_busy(mocker: MockerFixture) -> None:
    _ = mocker.patch(WHICH, return_value="/usr/bin/flac")
    gate = threading.Event()

    def popen(command: list[str], cwd: Path, **kwargs: Any) -> MagicMock:
        _ = (Path(cwd) / "output.flac").write_bytes(b"fixed")
        process = MagicMock()
        process.stderr = _GatedStream(gate)
        process.wait.return_value = 0
        return process

    _ = mocker.patch(POPEN, side_effect=popen)
    worker = FlacWorker()
    replies, finished = _collect(worker)

    worker.post_message(ENCODE)
    try:
        with pytest.raises(RuntimeError, match="busy"):
            worker.post_message(ENCODE)
    finally:
        gate.set()
    assert finished.wait(5)
    worker.join(5)

    assert [reply["reply"] for reply in replies] == ["done"]
