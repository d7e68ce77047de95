"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trackmux.config.config import Config
from trackmux.features.transcode.domain.codecs import OutputCodec
from trackmux.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from trackmux.ui.cli.args.options import CLIArgs, FixMd5Args, RemuxArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="trackmux - re-encode tracks and attach metadata and cover art.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        remux_parser = subparsers.add_parser(
            "remux",
            help="Re-encode a track and merge metadata and cover art",
        )
        _ = remux_parser.add_argument(
            "input_path",
            type=str,
            help="Source track (FLAC, or MP3 for quality tier 5)",
            metavar="INPUT",
        )
        _ = remux_parser.add_argument(
            "-o",
            "--output",
            dest="output_path",
            type=str,
            required=True,
            help="Destination file",
            metavar="OUTPUT",
        )
        _ = remux_parser.add_argument(
            "--codec",
            type=str.upper,
            choices=[codec.value for codec in OutputCodec],
            help="Output codec (defaults to the configured codec)",
        )
        _ = remux_parser.add_argument(
            "--quality",
            type=str,
            choices=["5", "6", "7", "27"],
            help="Source quality tier (detected from INPUT when omitted)",
        )
        _ = remux_parser.add_argument(
            "--bitrate",
            type=int,
            help="Target bitrate in kbps for lossy codecs",
        )
        _ = remux_parser.add_argument(
            "--track-json",
            type=str,
            help="Catalogue track JSON supplying tag values",
            metavar="FILE",
        )
        _ = remux_parser.add_argument(
            "--no-metadata",
            action="store_true",
            help="Do not merge metadata even when --track-json is given",
        )
        art_group = remux_parser.add_mutually_exclusive_group()
        _ = art_group.add_argument(
            "--album-art",
            type=str,
            help="Cover image to attach instead of downloading one",
            metavar="FILE",
        )
        _ = art_group.add_argument(
            "--no-album-art",
            action="store_true",
            help="Skip cover art entirely",
        )
        _ = remux_parser.add_argument(
            "--upc",
            type=str,
            help="Album barcode written as the barcode tag",
        )
        ArgumentParser._add_verbosity(remux_parser)

        md5_parser = subparsers.add_parser(
            "fix-md5",
            help="Rewrite a FLAC file so its STREAMINFO MD5 matches the audio",
        )
        _ = md5_parser.add_argument(
            "input_path",
            type=str,
            help="Source FLAC file",
            metavar="INPUT",
        )
        _ = md5_parser.add_argument(
            "-o",
            "--output",
            dest="output_path",
            type=str,
            required=True,
            help="Destination FLAC file",
            metavar="OUTPUT",
        )
        ArgumentParser._add_verbosity(md5_parser)

        return parser

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            Args: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        input_path = Path(parsed_args.input_path)
        if not input_path.is_file():
            logger.error("Input file does not exist: %s", input_path)
            sys.exit(1)

        command: str = parsed_args.command

        if command == "remux":
            return ArgumentParser._process_remux(parsed_args, input_path)

        if command == "fix-md5":
            return FixMd5Args(
                command="fix-md5",
                input_path=input_path,
                output_path=Path(parsed_args.output_path),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_remux(parsed_args: argparse.Namespace, input_path: Path) -> RemuxArgs:
        track_json = Path(parsed_args.track_json) if parsed_args.track_json else None
        if track_json is not None and not track_json.is_file():
            logger.error("Track JSON does not exist: %s", track_json)
            sys.exit(1)

        album_art = Path(parsed_args.album_art) if parsed_args.album_art else None
        if album_art is not None and not album_art.is_file():
            logger.error("Album art does not exist: %s", album_art)
            sys.exit(1)

        if parsed_args.bitrate is not None and parsed_args.bitrate <= 0:
            logger.error("Bitrate must be positive: %s", parsed_args.bitrate)
            sys.exit(1)

        return RemuxArgs(
            command="remux",
            input_path=input_path,
            output_path=Path(parsed_args.output_path),
            codec=parsed_args.codec,
            quality=parsed_args.quality,
            bitrate=parsed_args.bitrate,
            track_json=track_json,
            apply_metadata=track_json is not None and not parsed_args.no_metadata,
            album_art=album_art,
            no_album_art=parsed_args.no_album_art,
            upc=parsed_args.upc,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
