"""Command line interface package."""

from trackmux.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
