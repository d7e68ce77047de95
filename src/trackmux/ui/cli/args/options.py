"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class RemuxArgs:
    """Command line arguments for the ``remux`` subcommand."""

    command: Literal["remux"]
    input_path: Path
    output_path: Path
    codec: str | None
    quality: str | None
    bitrate: int | None
    track_json: Path | None
    apply_metadata: bool
    album_art: Path | None
    no_album_art: bool
    upc: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class FixMd5Args:
    """Command line arguments for the ``fix-md5`` subcommand."""

    command: Literal["fix-md5"]
    input_path: Path
    output_path: Path
    verbose: bool
    quiet: bool


CLIArgs = RemuxArgs | FixMd5Args

__all__ = ["CLIArgs", "FixMd5Args", "RemuxArgs"]
