"""
Summary: Caller-supplied output settings for one transcode call.
Why: Replace loose option dictionaries with a validated, typed value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trackmux.config import settings as runtime

from .codecs import OutputCodec, resolve_codec

MP3_QUALITY_TIER = "5"


@dataclass(frozen=True, slots=True)
class TranscodeSettings:
    """Output codec, source quality tier, bitrate and artwork options.

    ``output_quality`` is the source tier: ``"5"`` means the input is an
    MP3 at 320 kbps, any other tier means the input is FLAC.
    """

    output_codec: OutputCodec = OutputCodec.FLAC
    output_quality: str = "27"
    bitrate: int | None = None
    apply_metadata: bool = True
    album_art_size: int = 3600
    album_art_quality: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_codec", resolve_codec(self.output_codec))
        object.__setattr__(self, "output_quality", str(self.output_quality))
        if self.bitrate is not None and self.bitrate <= 0:
            raise ValueError(f"bitrate must be positive, got {self.bitrate}")
        if self.album_art_size <= 0:
            raise ValueError(f"album_art_size must be positive, got {self.album_art_size}")
        if not 0.0 < self.album_art_quality <= 1.0:
            raise ValueError(
                f"album_art_quality must be within (0, 1], got {self.album_art_quality}"
            )

    @property
    def is_mp3_source(self) -> bool:
        return self.output_quality == MP3_QUALITY_TIER

    @classmethod
    def from_config(cls, **overrides: Any) -> "TranscodeSettings":
        """Build settings from configured defaults, applying non-``None`` overrides."""

        values: dict[str, Any] = {
            "output_codec": runtime.DEFAULT_OUTPUT_CODEC,
            "output_quality": runtime.DEFAULT_OUTPUT_QUALITY,
            "bitrate": runtime.DEFAULT_BITRATE,
            "apply_metadata": runtime.DEFAULT_APPLY_METADATA,
            "album_art_size": runtime.DEFAULT_ALBUM_ART_SIZE,
            "album_art_quality": runtime.DEFAULT_ALBUM_ART_QUALITY,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


__all__ = ["MP3_QUALITY_TIER", "TranscodeSettings"]
