"""Tests for the output codec table."""

import pytest

from trackmux.features.transcode.domain.codecs import (
    CODEC_MAP,
    OutputCodec,
    UnsupportedCodecError,
    codec_spec,
    resolve_codec,
)


@pytest.mark.parametrize(
    ("codec", "extension", "encoder"),
    [
        (OutputCodec.FLAC, "flac", "flac"),
        (OutputCodec.WAV, "wav", "pcm_s16le"),
        (OutputCodec.ALAC, "m4a", "alac"),
        (OutputCodec.MP3, "mp3", "libmp3lame"),
        (OutputCodec.AAC, "m4a", "aac"),
        (OutputCodec.OPUS, "opus", "libopus"),
    ],
)
def test_codec_map_entries(codec: OutputCodec, extension: str, encoder: str) -> None:
    spec = CODEC_MAP[codec]
    assert spec.extension == extension
    assert spec.encoder == encoder


def test_codec_map_covers_every_codec() -> None:
    assert set(CODEC_MAP) == set(OutputCodec)


def test_only_wav_and_opus_reject_attached_pictures() -> None:
    rejecting = {codec for codec, spec in CODEC_MAP.items() if not spec.supports_attached_picture}
    assert rejecting == {OutputCodec.WAV, OutputCodec.OPUS}


def test_codec_map_is_read_only() -> None:
    with pytest.raises(TypeError):
        CODEC_MAP[OutputCodec.FLAC] = CODEC_MAP[OutputCodec.MP3]  # type: ignore[index]


def test_resolve_codec_accepts_any_case() -> None:
    assert resolve_codec("opus") is OutputCodec.OPUS
    assert resolve_codec(" Alac ") is OutputCodec.ALAC
    assert codec_spec("aac").encoder == "aac"


def test_resolve_codec_rejects_unknown_names() -> None:
    with pytest.raises(UnsupportedCodecError, match="VORBIS"):
        _ = resolve_codec("VORBIS")
