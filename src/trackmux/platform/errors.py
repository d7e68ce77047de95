"""Where: src/trackmux/platform/errors.py
What: Exception hierarchy raised by the engine and hash worker adapters.
Why: Let callers tell engine failures apart without parsing messages.
"""

from __future__ import annotations

from collections.abc import Sequence


class TrackmuxError(Exception):
    """Base error for trackmux."""


class EngineError(TrackmuxError):
    """Raised when the transcoding engine cannot complete an operation."""


class EngineNotLoadedError(EngineError):
    """Raised when an engine operation is attempted before ``load``."""


class EngineLoadCancelledError(EngineError):
    """Raised when the cancellation signal fires during ``load``."""


class VirtualFileNotFoundError(EngineError, FileNotFoundError):
    """Raised when a named virtual file does not exist in the engine."""


class EngineRunError(EngineError):
    """Raised when an engine invocation exits unsuccessfully."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str) -> None:
        self.command_args: tuple[str, ...] = tuple(args)
        self.returncode: int = returncode
        self.stderr: str = stderr
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
        super().__init__(f"engine exited with status {returncode}: {detail}")


class HashWorkerError(TrackmuxError):
    """Raised when the hash repair worker reports a failure."""


__all__ = [
    "EngineError",
    "EngineLoadCancelledError",
    "EngineNotLoadedError",
    "EngineRunError",
    "HashWorkerError",
    "TrackmuxError",
    "VirtualFileNotFoundError",
]
