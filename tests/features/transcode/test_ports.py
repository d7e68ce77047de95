"""Adapters satisfy the transcode ports structurally."""

from support.fakes import FakeEngine, FakeWorker, StubArtworkProvider
from trackmux.features.transcode.usecases.ports import (
    ArtworkProviderPort,
    HashWorkerPort,
    TranscodeEnginePort,
)
from trackmux.platform.artwork import ArtworkFetcher
from trackmux.platform.ffmpeg import FFmpegEngine
from trackmux.platform.flac import FlacWorker


def test_platform_adapters_match_ports() -> None:
    assert isinstance(FFmpegEngine("ffmpeg"), TranscodeEnginePort)
    assert isinstance(FlacWorker(), HashWorkerPort)
    assert isinstance(ArtworkFetcher(), ArtworkProviderPort)


def test_fakes_match_ports() -> None:
    assert isinstance(FakeEngine(), TranscodeEnginePort)
    assert isinstance(FakeWorker([]), HashWorkerPort)
    assert isinstance(StubArtworkProvider(None), ArtworkProviderPort)
