"""
Summary: Decide whether a track needs re-encoding and metadata application.
Why: Two booleans gate every engine pass, so they are computed in one place.
"""

from __future__ import annotations

from ..domain.codecs import OutputCodec
from ..domain.transcode_settings import TranscodeSettings
from .processing_types import ProcessingPlan

_PASSTHROUGH_MP3_BITRATE = 320


def can_skip_reencode(settings: TranscodeSettings) -> bool:
    """Return True when the source already has the requested codec and bitrate."""

    if not settings.is_mp3_source and settings.output_codec is OutputCodec.FLAC:
        return True
    return (
        settings.is_mp3_source
        and settings.output_codec is OutputCodec.MP3
        and settings.bitrate == _PASSTHROUGH_MP3_BITRATE
    )


def plan_processing(settings: TranscodeSettings) -> ProcessingPlan:
    return ProcessingPlan(
        reencode=not can_skip_reencode(settings),
        apply_metadata=settings.apply_metadata,
        input_extension="mp3" if settings.is_mp3_source else "flac",
        codec=settings.output_codec,
    )


__all__ = ["can_skip_reencode", "plan_processing"]
