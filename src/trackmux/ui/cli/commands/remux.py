"""src/trackmux/ui/cli/commands/remux.py
What: Re-encode and tag a single track from the CLI.
Why: Drive the orchestrator with a locally spawned ffmpeg engine.
"""

import json
import logging
from pathlib import Path
from typing import Literal, override

from trackmux.features.transcode import (
    ProcessingEvent,
    TranscodeSettings,
    apply_metadata,
    create_engine,
    load_engine,
)
from trackmux.platform.errors import EngineError
from trackmux.platform.logging import logger
from trackmux.platform.probe import detect_quality_tier
from trackmux.shared.track import Track
from trackmux.ui.cli.args.options import RemuxArgs
from trackmux.ui.cli.commands.executor import CommandExecutor


class RemuxCommand(CommandExecutor[RemuxArgs]):
    """Command for re-encoding and tagging one file."""

    def build_settings(self) -> TranscodeSettings:
        """Merge CLI options over configured defaults."""

        quality = self.args.quality or detect_quality_tier(self.args.input_path)
        return TranscodeSettings.from_config(
            output_codec=self.args.codec,
            output_quality=quality,
            bitrate=self.args.bitrate,
            apply_metadata=self.args.apply_metadata,
        )

    def load_track(self) -> Track:
        if self.args.track_json is None:
            return Track()
        with open(self.args.track_json, encoding="utf-8") as f:
            return Track.from_dict(json.load(f))

    def load_album_art(self) -> bytes | Literal[False] | None:
        if self.args.no_album_art:
            return False
        if self.args.album_art is not None:
            return self.args.album_art.read_bytes()
        return None

    @override
    def execute(self) -> Path:
        settings = self.build_settings()
        track = self.load_track()
        track_buffer = self.args.input_path.read_bytes()

        engine = create_engine()
        if engine is None:
            raise EngineError("ffmpeg executable not found; set ffmpeg_path in config.toml")

        with engine:
            _ = load_engine(engine)
            result = apply_metadata(
                track_buffer,
                track,
                engine,
                settings,
                status=self.report_status,
                album_art=self.load_album_art(),
                upc=self.args.upc or track.album.upc,
            )

        output = self.write_output(self.args.output_path, result)
        logger.log(
            logging.INFO,
            "Wrote %s",
            output,
            extra={
                "processing_event": ProcessingEvent.COMPLETE.value,
                "source_path": str(self.args.input_path),
                "target_path": str(output),
                "codec": settings.output_codec.value,
                "size_bytes": len(result),
            },
        )
        return output
