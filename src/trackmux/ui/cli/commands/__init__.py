"""Command execution package for CLI."""

from trackmux.ui.cli.commands.executor import CommandExecutor
from trackmux.ui.cli.commands.fix_md5 import FixMd5Command
from trackmux.ui.cli.commands.remux import RemuxCommand

__all__ = [
    "CommandExecutor",
    "FixMd5Command",
    "RemuxCommand",
]
