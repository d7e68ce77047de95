"""Command line argument handling package."""

from trackmux.ui.cli.args.parser import ArgumentParser
from trackmux.ui.cli.args.options import CLIArgs, FixMd5Args, RemuxArgs

__all__ = ["ArgumentParser", "CLIArgs", "FixMd5Args", "RemuxArgs"]
