"""
Command-Line Interface (CLI) setup for Video Tools.

This module uses Python's `argparse` to define and parse the command-line
arguments. Every subcommand corresponds to one operation of the orchestration
layer; `main.py` dispatches on the `command` attribute of the parsed namespace.
"""
import argparse
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .domain.formats import AudioFormat, VideoFormat
from .domain.requests import TrackUpdate

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _flag(text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"'{text}' is not a boolean (use 1/0, true/false, yes/no).")


def track_update(text: str) -> TrackUpdate:
    """
    Parses `SELECTOR:NAME:ENABLED:DEFAULT`, e.g. `a1:English commentary:1:0`.

    The name may itself contain colons; only the first and the last two
    separators are significant.
    """
    selector, _, rest = text.partition(":")
    parts = rest.rsplit(":", 2)
    if not selector or len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"Invalid track update '{text}'. Expected SELECTOR:NAME:ENABLED:DEFAULT."
        )
    name, enabled, default = parts
    return TrackUpdate(selector=selector, name=name, enabled=_flag(enabled), default=_flag(default))


def track_ids(text: str) -> Tuple[int, ...]:
    """Parses a comma-separated list of mkvmerge track ids, e.g. `0,2`. Empty means none."""
    try:
        return tuple(int(part) for part in text.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid track id list '{text}'. Use comma-separated integers.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="videotools",
        description="Convert, split, merge and inspect video files with ffmpeg and MKVToolNix.",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Path to a YAML configuration file (default: config.user.yaml beside the launcher).",
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=None, choices=LOG_LEVELS,
        help="Set the logging level (default: from the configuration, else INFO).",
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Size of the worker pool running the external tools (default: number of CPU cores).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    convert = subparsers.add_parser("convert", help="Remux a video into another container.")
    convert.add_argument("input", type=Path, help="Video file to convert.")
    convert.add_argument(
        "--format", dest="video_format", required=True,
        type=VideoFormat.from_extension, choices=list(VideoFormat),
        metavar="{" + ",".join(f.extension for f in VideoFormat) + "}",
        help="Target container format.",
    )

    split = subparsers.add_parser("split", help="Split a video into fixed-length segments.")
    split.add_argument("input", type=Path, help="Video file to split.")
    split.add_argument(
        "--segment-time", required=True,
        help="Segment length as HH:MM:SS or a number of seconds.",
    )

    merge = subparsers.add_parser("merge", help="Concatenate clips that share the same codecs.")
    merge.add_argument("clips", type=Path, nargs="+", help="Clips to merge, in order.")
    merge.add_argument("--output", "-o", type=Path, required=True, help="Merged output file.")

    extract_audio = subparsers.add_parser("extract-audio", help="Extract every audio track.")
    extract_audio.add_argument("input", type=Path, help="Video file to extract from.")
    extract_audio.add_argument(
        "--format", dest="audio_format", default=AudioFormat.AAC,
        type=_audio_format, choices=list(AudioFormat),
        metavar="{" + ",".join(f.extension for f in AudioFormat) + "}",
        help="Audio output format (default: aac).",
    )

    extract_subtitles = subparsers.add_parser("extract-subtitles", help="Extract every subtitle track as SRT.")
    extract_subtitles.add_argument("input", type=Path, help="Video file to extract from.")

    show = subparsers.add_parser("show-properties", help="Show the title and tracks of an MKV file.")
    show.add_argument("input", type=Path, help="MKV file to inspect.")

    edit = subparsers.add_parser("edit-properties", help="Edit the title and track properties of an MKV file in place.")
    edit.add_argument("input", type=Path, help="MKV file to edit.")
    edit.add_argument(
        "--title", default=None,
        help="New global title (default: keep the current one; pass an empty string to clear it).",
    )
    edit.add_argument(
        "--track", dest="tracks", type=track_update, action="append", default=[],
        metavar="SELECTOR:NAME:ENABLED:DEFAULT",
        help="Track update, e.g. 'a1:Commentary:1:0'. Selectors are shown by show-properties. Repeatable.",
    )

    remove = subparsers.add_parser("remove-tracks", help="Remux an MKV file keeping only the selected tracks.")
    remove.add_argument("input", type=Path, help="MKV file to read.")
    remove.add_argument("--output", "-o", type=Path, default=None, help="Output file (default: <stem>-new.mkv).")
    for track_kind in ("video", "audio", "subtitles"):
        remove.add_argument(
            f"--keep-{track_kind}", type=track_ids, default=(), metavar="IDS",
            help=f"Comma-separated ids of the {track_kind} tracks to keep; all others are dropped.",
        )

    subparsers.add_parser("check-tools", help="Verify that every external tool can be executed.")

    return parser


def _audio_format(text: str) -> AudioFormat:
    audio_format = AudioFormat.from_extension(text)
    if audio_format is None:
        raise argparse.ArgumentTypeError(f"Unsupported audio format: {text}")
    return audio_format


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for Video Tools.

    Args:
        argv: Arguments to parse instead of `sys.argv[1:]`.

    Returns:
        argparse.Namespace: An object containing the parsed command-line
                            arguments as attributes.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1.")

    return args
