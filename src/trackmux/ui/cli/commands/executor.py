"""src/trackmux/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse status reporting and output writing across commands.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from trackmux.platform.logging import logger
from trackmux.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT

    def __init__(self, args: ArgsT) -> None:
        self.args = args

    @abstractmethod
    def execute(self) -> Path:
        """Execute the command.

        Returns:
            Path of the written output file.
        """
        ...

    @staticmethod
    def report_status(description: str, progress: int | None = None) -> None:
        """Forward orchestrator status updates to the console."""

        if progress is None:
            logger.info(description)
        else:
            logger.debug("%s %d%%", description, progress)

    @staticmethod
    def write_output(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(data)
        return path
