"""Tests for the MD5 hash repair entry point."""

import pytest

from support.fakes import FakeWorker, StatusRecorder
from trackmux.features.transcode.usecases.hash_repair import (
    HASH_STATUS,
    build_encode_message,
    fix_md5_hash,
    scale_progress,
)
from trackmux.platform.errors import HashWorkerError


def _factory(worker: FakeWorker):
    return lambda: worker


def test_encode_message_shape() -> None:
    assert build_encode_message(b"flac") == {
        "command": "encode",
        "args": ["input.flac", "-o", "output.flac"],
        "outData": {"output.flac": {"MIME": "audio/flac"}},
        "fileData": {"input.flac": b"flac"},
    }


def test_resolves_with_first_blob_and_scales_progress() -> None:
    worker = FakeWorker(
        [
            {"reply": "progress", "values": [50, 200]},
            {"reply": "progress", "values": [0, 0]},
            {"reply": "progress", "values": [1, 3]},
            {"reply": "progress", "values": [200, 200]},
            {
                "reply": "done",
                "values": {
                    "output.flac": {"blob": b"fixed", "MIME": "audio/flac"},
                    "extra.flac": {"blob": b"ignored"},
                },
            },
        ]
    )
    seen: list[int] = []
    status = StatusRecorder()

    future = fix_md5_hash(
        b"broken", progress=seen.append, status=status, worker_factory=_factory(worker)
    )

    assert future.result(timeout=1) == b"fixed"
    assert seen == [25, 33, 100]
    assert status.calls == [
        (HASH_STATUS, 0),
        (HASH_STATUS, 25),
        (HASH_STATUS, 33),
        (HASH_STATUS, 100),
    ]
    assert worker.posted == [build_encode_message(b"broken")]


def test_result_is_settled_only_once() -> None:
    worker = FakeWorker(
        [
            {"reply": "done", "values": {"output.flac": {"blob": b"first"}}},
            {"reply": "done", "values": {"output.flac": {"blob": b"second"}}},
            {"reply": "error", "values": "late failure"},
        ]
    )

    future = fix_md5_hash(b"broken", worker_factory=_factory(worker))

    assert future.result(timeout=1) == b"first"


def test_error_reply_rejects() -> None:
    worker = FakeWorker([{"reply": "error", "values": "flac exited with status 1"}])

    future = fix_md5_hash(b"broken", worker_factory=_factory(worker))

    with pytest.raises(HashWorkerError, match="status 1"):
        _ = future.result(timeout=1)


def test_done_without_files_rejects() -> None:
    worker = FakeWorker([{"reply": "done", "values": {}}])

    future = fix_md5_hash(b"broken", worker_factory=_factory(worker))

    with pytest.raises(HashWorkerError):
        _ = future.result(timeout=1)


def test_pending_until_worker_replies() -> None:
    future = fix_md5_hash(b"broken", worker_factory=_factory(FakeWorker([])))
    assert not future.done()


@pytest.mark.parametrize(
    ("current", "total", "expected"),
    [(0, 100, 0), (99, 100, 99), (2, 3, 66), (5, 0, None)],
)
def test_scale_progress(current: int, total: int, expected: int | None) -> None:
    assert scale_progress(current, total) == expected
