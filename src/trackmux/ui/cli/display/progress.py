"""Progress display functionality for CLI."""

from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, final

from rich.console import Console
from rich.progress import Progress

from trackmux.features.transcode.usecases.hash_repair import HASH_STATUS, ProgressCallback
from trackmux.platform.logging import TrackmuxRichHandler, logger

HashRepair = Callable[..., Future[bytes]]


@final
class HashProgressDisplay:
    """Render hash worker progress as a Rich progress bar."""

    def run(self, track_buffer: bytes, repair: HashRepair) -> bytes:
        """Run ``repair`` on ``track_buffer`` and block until it resolves.

        Args:
            track_buffer: FLAC bytes to repair.
            repair: Callable accepting the buffer and a ``progress`` keyword.

        Returns:
            The repaired FLAC bytes.
        """
        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, TrackmuxRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id = progress.add_task(f"[cyan]{HASH_STATUS}", total=100)

            def _cb(percent: int) -> None:
                _ = progress.update(task_id, completed=min(max(percent, 0), 100))

            callback: ProgressCallback = _cb
            future = repair(track_buffer, progress=callback)
            result = future.result()
            _ = progress.update(task_id, completed=100)
        return result
