"""
Summary: Transcode use cases: decision, re-encode, metadata merge and hash repair.
Why: Expose the orchestration entry points from one import path.
"""

from .apply_metadata import METADATA_STATUS, apply_metadata
from .decision import can_skip_reencode, plan_processing
from .hash_repair import HASH_STATUS, build_encode_message, fix_md5_hash, scale_progress
from .metadata_step import ARTWORK_NAME, SIDECAR_NAME, AlbumArt, merge_metadata, resolve_artwork
from .ports import (
    ArtworkProviderPort,
    HashWorkerPort,
    StatusReporter,
    TranscodeEnginePort,
    WorkerMessage,
)
from .processing_types import ProcessingEvent, ProcessingPlan
from .transcode_step import REENCODE_STATUS, build_encode_args, transcode_track

__all__ = [
    "ARTWORK_NAME",
    "HASH_STATUS",
    "METADATA_STATUS",
    "REENCODE_STATUS",
    "SIDECAR_NAME",
    "AlbumArt",
    "ArtworkProviderPort",
    "HashWorkerPort",
    "ProcessingEvent",
    "ProcessingPlan",
    "StatusReporter",
    "TranscodeEnginePort",
    "WorkerMessage",
    "apply_metadata",
    "build_encode_args",
    "build_encode_message",
    "can_skip_reencode",
    "fix_md5_hash",
    "merge_metadata",
    "plan_processing",
    "resolve_artwork",
    "scale_progress",
    "transcode_track",
]
