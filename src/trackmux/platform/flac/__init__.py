"""flac hash repair worker."""

from .worker import FlacWorker, MessageHandler, WorkerMessage

__all__ = ["FlacWorker", "MessageHandler", "WorkerMessage"]
