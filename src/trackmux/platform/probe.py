"""Where: src/trackmux/platform/probe.py
What: Infer the source quality tier of an audio file from its stream info.
Why: Let the CLI pick the right input extension without asking the user.
"""

from __future__ import annotations

from pathlib import Path

from mutagen import MutagenError
from mutagen.flac import FLAC
from mutagen.mp3 import MP3

from trackmux.platform.logging import logger


def detect_quality_tier(path: Path) -> str | None:
    """Return ``"5"``, ``"6"``, ``"7"`` or ``"27"`` for MP3/FLAC sources.

    Returns:
        The tier string, or ``None`` when the file is neither MP3 nor FLAC.
    """
    suffix = path.suffix.lower()
    try:
        if suffix == ".mp3":
            _ = MP3(path)
            return "5"
        if suffix == ".flac":
            info = FLAC(path).info
            bits = int(getattr(info, "bits_per_sample", 16) or 16)
            rate = int(getattr(info, "sample_rate", 44100) or 44100)
            if bits <= 16 and rate <= 48000:
                return "6"
            if rate <= 96000:
                return "7"
            return "27"
    except MutagenError as exc:
        logger.warning("Could not read stream info from %s: %s", path, exc)
    return None


__all__ = ["detect_quality_tier"]
