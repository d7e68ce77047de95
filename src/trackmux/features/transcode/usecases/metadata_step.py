"""
Summary: Merge the metadata sidecar and optional cover art into a track container.
Why: Sequence the stream-copy passes that depend on each other's virtual files.
"""

from __future__ import annotations

import logging
from typing import Final, Literal

from trackmux.shared.track import Track

from ..domain.metadata_sidecar import MetadataFormatter
from ..domain.transcode_settings import TranscodeSettings
from .event_logging import log_event
from .ports import ArtworkProviderPort, TranscodeEnginePort
from .processing_types import ProcessingEvent, ProcessingPlan

SIDECAR_NAME: Final[str] = "metadata.txt"
ARTWORK_NAME: Final[str] = "albumArt.jpg"

AlbumArt = bytes | Literal[False] | None


def resolve_artwork(
    track: Track,
    settings: TranscodeSettings,
    plan: ProcessingPlan,
    album_art: AlbumArt,
    provider: ArtworkProviderPort | None,
    formatter: MetadataFormatter,
) -> bytes | None:
    """Return the cover to attach, or ``None`` for a metadata-only pass.

    ``album_art`` is tri-state: bytes are used as given, ``False`` suppresses
    artwork, and ``None`` asks ``provider`` for a resized download.
    """
    if album_art is False:
        log_event(
            logging.DEBUG,
            ProcessingEvent.ARTWORK_SKIP,
            "Album art suppressed by caller",
            reason="suppressed",
        )
        return None

    if not plan.spec.supports_attached_picture:
        log_event(
            logging.DEBUG,
            ProcessingEvent.ARTWORK_SKIP,
            "%s output cannot carry attached pictures",
            plan.codec.value,
            reason="unsupported_container",
            codec=plan.codec.value,
        )
        return None

    if album_art:
        return bytes(album_art)

    fetched = (
        provider.fetch_resized(
            formatter.full_res_image_url(track),
            settings.album_art_size,
            settings.album_art_quality,
        )
        if provider is not None
        else None
    )
    if not fetched:
        log_event(
            logging.INFO,
            ProcessingEvent.ARTWORK_SKIP,
            "No album art available",
            reason="unavailable",
        )
        return None
    return fetched


def merge_metadata(
    track_buffer: bytes,
    engine: TranscodeEnginePort,
    plan: ProcessingPlan,
    sidecar: str,
    artwork: bytes | None,
) -> bytes:
    """Apply ``sidecar`` to ``track_buffer`` and attach ``artwork`` when given.

    Performs one stream-copy merge pass, plus a second pass muxing the
    cover as an attached picture. Temporary files are removed only when
    every engine call succeeds.
    """
    extension = plan.spec.extension
    input_name = f"input.{extension}"
    merged_name = f"secondInput.{extension}"
    output_name = f"output.{extension}"

    engine.write_file(input_name, track_buffer)
    engine.write_file(SIDECAR_NAME, sidecar.encode("utf-8"))
    if artwork:
        engine.write_file(ARTWORK_NAME, artwork)

    engine.run(
        "-i", input_name,
        "-i", SIDECAR_NAME,
        "-map_metadata", "1",
        "-codec", "copy",
        merged_name,
    )

    if not artwork:
        merged = engine.read_file(merged_name)
        engine.delete_file(input_name)
        engine.delete_file(SIDECAR_NAME)
        engine.delete_file(merged_name)
        return merged

    log_event(
        logging.DEBUG,
        ProcessingEvent.ARTWORK_ATTACH,
        "Attaching album art (%d bytes)",
        len(artwork),
        size_bytes=len(artwork),
    )
    engine.run(
        "-i", merged_name,
        "-i", ARTWORK_NAME,
        "-c", "copy",
        "-map", "0",
        "-map", "1",
        "-disposition:v:0", "attached_pic",
        output_name,
    )
    output = engine.read_file(output_name)
    engine.delete_file(input_name)
    engine.delete_file(SIDECAR_NAME)
    engine.delete_file(merged_name)
    engine.delete_file(ARTWORK_NAME)
    engine.delete_file(output_name)
    return output


__all__ = [
    "ARTWORK_NAME",
    "SIDECAR_NAME",
    "AlbumArt",
    "merge_metadata",
    "resolve_artwork",
]
