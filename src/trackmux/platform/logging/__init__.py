"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, EventFileFormatter, logger, setup_logger
from .handlers import TrackmuxRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "EventFileFormatter",
    "TrackmuxRichHandler",
    "logger",
    "setup_logger",
]
