"""
Main entry point for the Video Tools application.

This script initializes the application, parses command-line arguments, builds
the orchestration layer (tool resolver, command builder, process runner) and
runs the operation selected by the subcommand. It waits for the operation's
future and turns its outcome into the process exit code.
"""

import sys
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from .cli import get_args
from .config.common import LOGGER_FORMAT, AppConfig, load_config
from .config.video import MKV_EXTENSION, REMOVE_TRACKS_DEFAULT_SUFFIX
from .domain.properties import MkvPropertyInfo
from .domain.requests import TrackRemovalSpec
from .services.audio_extractor import AudioExtractor
from .services.converter import VideoConverter
from .services.logging_service import ErrorLog, LoggingProgressListener
from .services.merger import VideoClipsMerger
from .services.process_runner import ProcessRunner
from .services.property_editor import MkvPropertyEditor
from .services.splitter import VideoSplitter
from .services.subtitle_extractor import SubtitleExtractor
from .services.track_remover import MkvTrackRemover
from .utils.command_builder import CommandBuilder
from .utils.tool_check import ToolCheck
from .utils.tool_resolver import ToolResolver

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


# Configure the logger for initial setup.
# The level is overridden once the configuration and arguments are known.
logger.remove()
logger.add(sys.stderr, level="INFO", format=LOGGER_FORMAT)


def get_base_path() -> Path:
    """
    Returns the directory the application runs from: the frozen executable's
    directory for a bundled build, otherwise the project root holding the
    `videotools` package.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent


def print_properties(info: MkvPropertyInfo) -> None:
    print(f"Title: {info.title or '(none)'}")
    print(f"{'ID':>3}  {'SEL':<5} {'TYPE':<10} {'CODEC':<24} {'LANG':<5} {'DEF':<4} {'ENA':<4} NAME")
    for track in info.tracks:
        print(
            f"{track.id:>3}  {track.selector:<5} {track.type.display_name:<10} {track.codec:<24} "
            f"{track.language:<5} {'yes' if track.default else 'no':<4} "
            f"{'yes' if track.enabled else 'no':<4} {track.name}"
        )


def dispatch(args, runner: ProcessRunner, builder: CommandBuilder, listener) -> Future:
    """Starts the operation named by `args.command` and returns its future."""
    command = args.command
    if command == "convert":
        return VideoConverter(runner, builder).convert(args.input, args.video_format, listener)
    if command == "split":
        return VideoSplitter(runner, builder).split(args.input, args.segment_time, listener)
    if command == "merge":
        return VideoClipsMerger(runner, builder).merge(args.clips, args.output, listener)
    if command == "extract-audio":
        return AudioExtractor(runner, builder).execute(args.input, args.audio_format, listener)
    if command == "extract-subtitles":
        return SubtitleExtractor(runner, builder).execute(args.input, listener)
    if command == "show-properties":
        return MkvPropertyEditor(runner, builder).get_properties(args.input, listener)
    if command == "edit-properties":
        return MkvPropertyEditor(runner, builder).update_properties(
            args.input, args.title, args.tracks, listener
        )
    if command == "remove-tracks":
        output = args.output or args.input.with_name(
            f"{args.input.stem}{REMOVE_TRACKS_DEFAULT_SUFFIX}.{MKV_EXTENSION}"
        )
        spec = TrackRemovalSpec(
            input_path=args.input,
            output_path=output,
            video_ids=args.keep_video,
            audio_ids=args.keep_audio,
            subtitle_ids=args.keep_subtitles,
        )
        return MkvTrackRemover(runner, builder).remove_tracks(spec, listener)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main function to run one Video Tools operation.

    This function performs the following steps:
    1. Parses command-line arguments.
    2. Loads the user configuration relative to the launcher's directory.
    3. Configures the global logger based on the arguments and configuration.
    4. Builds the tool resolver, command builder and process runner.
    5. Runs the selected operation and waits for its result.
    6. Shuts the process runner down and returns the exit code.
    """
    args = get_args(argv)
    config: AppConfig = load_config(get_base_path(), args.config)

    effective_log_level = args.log_level or config.log_level
    logger.remove()
    logger.add(sys.stderr, level=effective_log_level, format=LOGGER_FORMAT)

    logger.debug(f"Parsed arguments: {args}")

    resolver = ToolResolver(config.library_dir, config.tool_paths)

    if args.command == "check-tools":
        if ToolCheck.run_all(resolver):
            logger.success("All external tools are available.")
            return EXIT_SUCCESS
        return EXIT_FAILURE

    builder = CommandBuilder(resolver)
    error_log = ErrorLog(config.error_log_dir) if config.error_log_dir else None
    listener = LoggingProgressListener(args.command, error_log)

    with ProcessRunner(args.workers or config.workers) as runner:
        future = dispatch(args, runner, builder, listener)
        # Failures were already reported to the listener; only the exit code is left.
        error = future.exception()

    if error is not None:
        return EXIT_FAILURE
    if args.command == "show-properties":
        print_properties(future.result())
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
