"""
Summary: Metadata/transcode orchestrator public surface.
Why: Callers import settings, codecs and entry points without knowing the layout.
"""

from trackmux.platform.ffmpeg import create_engine, load_engine

from .domain import (
    CODEC_MAP,
    CodecSpec,
    OutputCodec,
    TranscodeSettings,
    UnsupportedCodecError,
    build_metadata_sidecar,
    resolve_codec,
)
from .usecases import (
    ProcessingEvent,
    apply_metadata,
    can_skip_reencode,
    fix_md5_hash,
    plan_processing,
)

__all__ = [
    "CODEC_MAP",
    "CodecSpec",
    "OutputCodec",
    "ProcessingEvent",
    "TranscodeSettings",
    "UnsupportedCodecError",
    "apply_metadata",
    "build_metadata_sidecar",
    "can_skip_reencode",
    "create_engine",
    "fix_md5_hash",
    "load_engine",
    "plan_processing",
    "resolve_codec",
]
