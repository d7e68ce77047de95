"""
Summary: Shared enums and plan dataclasses for the transcode flow.
Why: Keep the orchestrator lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..domain.codecs import CODEC_MAP, CodecSpec, OutputCodec


class ProcessingEvent(StrEnum):
    """Structured event identifiers for transcode logs."""

    ENGINE_LOAD = "engine.load"
    REENCODE_START = "transcode.reencode.start"
    REENCODE_COMPLETE = "transcode.reencode.complete"
    REENCODE_SKIP = "transcode.reencode.skip"
    METADATA_START = "transcode.metadata.start"
    METADATA_SKIP = "transcode.metadata.skip"
    ARTWORK_ATTACH = "transcode.artwork.attach"
    ARTWORK_SKIP = "transcode.artwork.skip"
    COMPLETE = "transcode.complete"
    HASH_REPAIR_START = "hash.repair.start"
    HASH_REPAIR_COMPLETE = "hash.repair.complete"


@dataclass(frozen=True, slots=True)
class ProcessingPlan:
    """Gates deciding which engine passes a call performs."""

    reencode: bool
    apply_metadata: bool
    input_extension: str
    codec: OutputCodec

    @property
    def spec(self) -> CodecSpec:
        return CODEC_MAP[self.codec]

    @property
    def is_identity(self) -> bool:
        """True when the input buffer is returned untouched."""

        return not self.reencode and not self.apply_metadata


__all__ = ["ProcessingEvent", "ProcessingPlan"]
