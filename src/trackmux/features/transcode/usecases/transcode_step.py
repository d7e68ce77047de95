"""
Summary: Re-encode a track buffer through the engine's virtual filesystem.
Why: Keep encoder flag selection and temp-file handling out of the orchestrator.
"""

from __future__ import annotations

import logging

from ..domain.codecs import OutputCodec
from ..domain.transcode_settings import TranscodeSettings
from .event_logging import log_event
from .ports import StatusReporter, TranscodeEnginePort
from .processing_types import ProcessingEvent, ProcessingPlan

REENCODE_STATUS = "Re-encoding track..."


def build_encode_args(plan: ProcessingPlan, settings: TranscodeSettings) -> list[str]:
    """Return ffmpeg arguments converting ``input.*`` into ``output.*``."""

    spec = plan.spec
    args = ["-i", f"input.{plan.input_extension}", "-c:a", spec.encoder]
    if settings.bitrate and not spec.lossless:
        args += ["-b:a", f"{settings.bitrate}k"]
    if plan.codec is OutputCodec.OPUS:
        args += ["-vbr", "on"]
    args.append(f"output.{spec.extension}")
    return args


def transcode_track(
    track_buffer: bytes,
    engine: TranscodeEnginePort,
    plan: ProcessingPlan,
    settings: TranscodeSettings,
    status: StatusReporter | None = None,
) -> bytes:
    """Encode ``track_buffer`` into ``plan.codec`` and return the new bytes.

    Temporary files are removed only when every engine call succeeds.
    """
    input_name = f"input.{plan.input_extension}"
    output_name = f"output.{plan.spec.extension}"

    if status is not None:
        status(REENCODE_STATUS)
    log_event(
        logging.DEBUG,
        ProcessingEvent.REENCODE_START,
        "Re-encoding %s -> %s",
        input_name,
        output_name,
        codec=plan.codec.value,
        encoder=plan.spec.encoder,
        bitrate=settings.bitrate if not plan.spec.lossless else None,
    )

    engine.write_file(input_name, track_buffer)
    engine.run(*build_encode_args(plan, settings))
    encoded = engine.read_file(output_name)
    engine.delete_file(input_name)
    engine.delete_file(output_name)

    log_event(
        logging.DEBUG,
        ProcessingEvent.REENCODE_COMPLETE,
        "Re-encoded to %s (%d bytes)",
        plan.codec.value,
        len(encoded),
        codec=plan.codec.value,
        size_bytes=len(encoded),
    )
    return encoded


__all__ = ["REENCODE_STATUS", "build_encode_args", "transcode_track"]
