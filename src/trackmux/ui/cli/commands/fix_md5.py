"""src/trackmux/ui/cli/commands/fix_md5.py
What: Repair the MD5 signature of a FLAC file from the CLI.
Why: Expose the hash worker with a progress bar for single files.
"""

import logging
from pathlib import Path
from typing import override

from trackmux.features.transcode.usecases import ProcessingEvent, fix_md5_hash
from trackmux.platform.logging import logger
from trackmux.ui.cli.args.options import FixMd5Args
from trackmux.ui.cli.commands.executor import CommandExecutor
from trackmux.ui.cli.display.progress import HashProgressDisplay


class FixMd5Command(CommandExecutor[FixMd5Args]):
    """Command for repairing a FLAC file's MD5 hash."""

    @override
    def execute(self) -> Path:
        track_buffer = self.args.input_path.read_bytes()
        repaired = HashProgressDisplay().run(track_buffer, fix_md5_hash)
        output = self.write_output(self.args.output_path, repaired)
        logger.log(
            logging.INFO,
            "MD5 hash fixed",
            extra={
                "processing_event": ProcessingEvent.HASH_REPAIR_COMPLETE.value,
                "source_path": str(self.args.input_path),
                "target_path": str(output),
                "size_bytes": len(repaired),
            },
        )
        return output
