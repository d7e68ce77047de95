"""
Summary: Pure transcode domain values: codec table, settings and sidecar text.
Why: Keep lookups and text building free of engine side effects.
"""

from .codecs import CODEC_MAP, CodecSpec, OutputCodec, UnsupportedCodecError, resolve_codec
from .metadata_sidecar import SIDECAR_HEADER, VARIOUS_ARTISTS, build_metadata_sidecar
from .transcode_settings import TranscodeSettings

__all__ = [
    "CODEC_MAP",
    "SIDECAR_HEADER",
    "VARIOUS_ARTISTS",
    "CodecSpec",
    "OutputCodec",
    "TranscodeSettings",
    "UnsupportedCodecError",
    "build_metadata_sidecar",
    "resolve_codec",
]
