"""Command line interface for trackmux."""

import sys
from typing import final

from trackmux.platform.logging import logger
from trackmux.ui.cli.args import ArgumentParser
from trackmux.ui.cli.args.options import CLIArgs, FixMd5Args, RemuxArgs
from trackmux.ui.cli.commands import FixMd5Command, RemuxCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, RemuxArgs):
                _ = RemuxCommand(args).execute()
                return

            assert isinstance(args, FixMd5Args)
            _ = FixMd5Command(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
