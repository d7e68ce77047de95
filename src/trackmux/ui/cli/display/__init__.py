"""Display helpers for CLI output."""

from trackmux.ui.cli.display.progress import HashProgressDisplay

__all__ = ["HashProgressDisplay"]
