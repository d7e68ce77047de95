"""Where: src/trackmux/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from trackmux.config.config import config as app_config

_CODEC_NAMES: tuple[str, ...] = ("FLAC", "WAV", "ALAC", "MP3", "AAC", "OPUS")
_QUALITY_TIERS: tuple[str, ...] = ("5", "6", "7", "27")

# Output defaults -------------------------------------------------------------

_codec = str(getattr(app_config, "output_codec", "FLAC") or "FLAC").upper()
DEFAULT_OUTPUT_CODEC: str = _codec if _codec in _CODEC_NAMES else "FLAC"

_quality = str(getattr(app_config, "output_quality", "27") or "27")
DEFAULT_OUTPUT_QUALITY: str = _quality if _quality in _QUALITY_TIERS else "27"

_bitrate = getattr(app_config, "bitrate", None)
DEFAULT_BITRATE: int | None = (
    _bitrate if isinstance(_bitrate, int) and _bitrate > 0 else None
)

DEFAULT_APPLY_METADATA: bool = bool(getattr(app_config, "apply_metadata", True))


# Album art -------------------------------------------------------------------

_art_size = getattr(app_config, "album_art_size", 3600)
DEFAULT_ALBUM_ART_SIZE: int = (
    _art_size if isinstance(_art_size, int) and _art_size > 0 else 3600
)

_art_quality = getattr(app_config, "album_art_quality", 1.0)
DEFAULT_ALBUM_ART_QUALITY: float = (
    float(_art_quality)
    if isinstance(_art_quality, (int, float)) and 0.0 < _art_quality <= 1.0
    else 1.0
)


# External engines ------------------------------------------------------------

# Bare names are looked up on PATH at engine creation time.
FFMPEG_EXECUTABLE: str = str(app_config.ffmpeg_path) if app_config.ffmpeg_path else "ffmpeg"
FLAC_EXECUTABLE: str = str(app_config.flac_path) if app_config.flac_path else "flac"


# Network ---------------------------------------------------------------------

_timeout = getattr(app_config, "http_timeout", 15.0)
HTTP_TIMEOUT: float = (
    float(_timeout) if isinstance(_timeout, (int, float)) and _timeout > 0 else 15.0
)


__all__ = [
    "DEFAULT_OUTPUT_CODEC",
    "DEFAULT_OUTPUT_QUALITY",
    "DEFAULT_BITRATE",
    "DEFAULT_APPLY_METADATA",
    "DEFAULT_ALBUM_ART_SIZE",
    "DEFAULT_ALBUM_ART_QUALITY",
    "FFMPEG_EXECUTABLE",
    "FLAC_EXECUTABLE",
    "HTTP_TIMEOUT",
]
