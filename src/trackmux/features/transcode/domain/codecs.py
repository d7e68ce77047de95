"""
Summary: Map output codec names to container extensions and encoder ids.
Why: Give every step one fixed lookup for file names and encoder flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping


class OutputCodec(StrEnum):
    """Closed set of output codecs."""

    FLAC = "FLAC"
    WAV = "WAV"
    ALAC = "ALAC"
    MP3 = "MP3"
    AAC = "AAC"
    OPUS = "OPUS"


class UnsupportedCodecError(ValueError):
    """Raised when a codec name is not part of ``OutputCodec``."""


@dataclass(frozen=True, slots=True)
class CodecSpec:
    """Container extension and ffmpeg encoder for one output codec."""

    extension: str
    encoder: str
    lossless: bool
    supports_attached_picture: bool = True


CODEC_MAP: Final[Mapping[OutputCodec, CodecSpec]] = MappingProxyType(
    {
        OutputCodec.FLAC: CodecSpec(extension="flac", encoder="flac", lossless=True),
        OutputCodec.WAV: CodecSpec(
            extension="wav",
            encoder="pcm_s16le",
            lossless=True,
            supports_attached_picture=False,
        ),
        OutputCodec.ALAC: CodecSpec(extension="m4a", encoder="alac", lossless=True),
        OutputCodec.MP3: CodecSpec(extension="mp3", encoder="libmp3lame", lossless=False),
        OutputCodec.AAC: CodecSpec(extension="m4a", encoder="aac", lossless=False),
        OutputCodec.OPUS: CodecSpec(
            extension="opus",
            encoder="libopus",
            lossless=False,
            supports_attached_picture=False,
        ),
    }
)


def resolve_codec(codec: OutputCodec | str) -> OutputCodec:
    """Return the ``OutputCodec`` for ``codec``, accepting names in any case."""

    if isinstance(codec, OutputCodec):
        return codec
    try:
        return OutputCodec(str(codec).strip().upper())
    except ValueError:
        raise UnsupportedCodecError(f"unsupported output codec: {codec!r}") from None


def codec_spec(codec: OutputCodec | str) -> CodecSpec:
    return CODEC_MAP[resolve_codec(codec)]


__all__ = [
    "CODEC_MAP",
    "CodecSpec",
    "OutputCodec",
    "UnsupportedCodecError",
    "codec_spec",
    "resolve_codec",
]
