"""
Summary: Orchestrate re-encoding, metadata merging and cover attachment for one track.
Why: Provide the single entry point callers use to turn downloaded bytes into a tagged file.
"""

from __future__ import annotations

import logging

from trackmux.shared.formatting import DEFAULT_FORMATTER
from trackmux.shared.track import Track

from ..domain.codecs import OutputCodec
from ..domain.metadata_sidecar import MetadataFormatter, build_metadata_sidecar
from ..domain.transcode_settings import TranscodeSettings
from .decision import plan_processing
from .event_logging import log_event
from .metadata_step import AlbumArt, merge_metadata, resolve_artwork
from .ports import ArtworkProviderPort, StatusReporter, TranscodeEnginePort
from .processing_types import ProcessingEvent
from .transcode_step import transcode_track

METADATA_STATUS = "Applying metadata..."


def _default_artwork_provider() -> ArtworkProviderPort:
    from trackmux.platform.artwork import ArtworkFetcher

    return ArtworkFetcher()


def apply_metadata(
    track_buffer: bytes,
    track: Track,
    engine: TranscodeEnginePort,
    settings: TranscodeSettings,
    *,
    status: StatusReporter | None = None,
    album_art: AlbumArt = None,
    upc: str | None = None,
    artwork_provider: ArtworkProviderPort | None = None,
    formatter: MetadataFormatter = DEFAULT_FORMATTER,
) -> bytes:
    """Return ``track_buffer`` encoded and tagged according to ``settings``.

    Args:
        track_buffer: Encoded source audio (MP3 for tier ``"5"``, FLAC otherwise).
        track: Catalogue record supplying the tag values.
        engine: Loaded transcoding engine; must not be shared with concurrent calls.
        settings: Output codec, quality tier, bitrate and artwork options.
        status: Optional UI status callback.
        album_art: Cover bytes, ``False`` to skip artwork, or ``None`` to fetch it.
        upc: Album barcode written as ``barcode``.
        artwork_provider: Source for fetched covers; defaults to an HTTP fetcher.
        formatter: Title and artist formatting collaborator.

    Returns:
        The same ``track_buffer`` object when nothing needs doing, else new bytes.
    """
    plan = plan_processing(settings)
    if plan.is_identity:
        log_event(
            logging.DEBUG,
            ProcessingEvent.REENCODE_SKIP,
            "Track already in requested format; metadata disabled",
            reason="identity",
        )
        return track_buffer

    if plan.reencode:
        track_buffer = transcode_track(track_buffer, engine, plan, settings, status)
    else:
        log_event(
            logging.DEBUG,
            ProcessingEvent.REENCODE_SKIP,
            "Re-encode not required for %s",
            plan.codec.value,
            reason="already_encoded",
            codec=plan.codec.value,
        )

    if not plan.apply_metadata:
        return track_buffer
    if plan.codec is OutputCodec.WAV:
        log_event(
            logging.DEBUG,
            ProcessingEvent.METADATA_SKIP,
            "WAV output does not carry metadata",
            reason="unsupported_container",
            codec=plan.codec.value,
        )
        return track_buffer

    if status is not None:
        status(METADATA_STATUS)
    log_event(
        logging.DEBUG,
        ProcessingEvent.METADATA_START,
        "Applying metadata to %s",
        formatter.format_title(track),
        codec=plan.codec.value,
    )

    sidecar = build_metadata_sidecar(track, upc, formatter)
    provider = artwork_provider
    if provider is None and album_art is None and plan.spec.supports_attached_picture:
        provider = _default_artwork_provider()
    artwork = resolve_artwork(track, settings, plan, album_art, provider, formatter)

    result = merge_metadata(track_buffer, engine, plan, sidecar, artwork)
    log_event(
        logging.DEBUG,
        ProcessingEvent.COMPLETE,
        "Tagged %s output ready (%d bytes)",
        plan.codec.value,
        len(result),
        codec=plan.codec.value,
        passes=2 if artwork else 1,
        size_bytes=len(result),
    )
    return result


__all__ = ["METADATA_STATUS", "apply_metadata"]
