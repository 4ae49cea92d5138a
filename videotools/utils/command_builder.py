"""
Pure builders mapping operation requests to argument vectors.

Every vector starts with the invocable returned by the `ToolResolver` and is
handed to the process runner as an explicit argv, never through a shell. The
builders perform no I/O: output paths are derived, not checked.
"""
import re
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union, assert_never

from ..config.audio import AUDIO_OUTPUT_INFIX, LOSSY_AUDIO_BITRATE
from ..config.video import (
    CONVERTED_SUFFIX,
    SEGMENT_COUNTER_PATTERN,
    SEGMENT_TIME_REGEX,
    SUBTITLE_CODEC_COPY,
    SUBTITLE_CODEC_MOV_TEXT,
    SUBTITLE_OUTPUT_CODEC,
    SUBTITLE_OUTPUT_EXTENSION,
)
from ..domain.exceptions import ValidationFailure
from ..domain.formats import AudioFormat, VideoFormat
from ..domain.requests import SubtitleStream, TrackRemovalSpec, TrackUpdate
from ..domain.tools import Tool
from .file_utils import file_extension, sibling_path
from .tool_resolver import ToolResolver

Command = Tuple[str, ...]
PathLike = Union[str, Path]

# --- ffmpeg / ffprobe flags ---
OVERWRITE = "-y"
INPUT = "-i"
MAP = "-map"
ALL_STREAMS = "0"

# --- mkvmerge / mkvpropedit flags ---
OUTPUT_FILE = "-o"
KEEP_VIDEO, NO_VIDEO = "-d", "--no-video"
KEEP_AUDIO, NO_AUDIO = "-a", "--no-audio"
KEEP_SUBTITLES, NO_SUBTITLES = "-s", "--no-subtitles"
NO_ATTACHMENTS = "--no-attachments"
IDENTIFY_JSON = "-J"
EDIT = "--edit"
SET = "--set"

_SEGMENT_TIME = re.compile(SEGMENT_TIME_REGEX)


def subtitle_codec_args(video_format: VideoFormat) -> List[str]:
    match video_format:
        case VideoFormat.MP4 | VideoFormat.MOV:
            return ["-c:s", SUBTITLE_CODEC_MOV_TEXT]
        case VideoFormat.MKV:
            return ["-c:s", SUBTITLE_CODEC_COPY]
        case _:
            assert_never(video_format)


def audio_bitrate_args(audio_format: AudioFormat) -> List[str]:
    match audio_format:
        case AudioFormat.AAC | AudioFormat.MP3:
            return ["-b:a", LOSSY_AUDIO_BITRATE]
        case AudioFormat.WAV:
            return []
        case _:
            assert_never(audio_format)


def validate_segment_time(segment_time: str) -> str:
    """
    Checks a split length of the form `HH:MM:SS` or a plain number of seconds.

    Raises:
        ValidationFailure: If the value has neither shape.
    """
    value = (segment_time or "").strip()
    if not _SEGMENT_TIME.fullmatch(value):
        raise ValidationFailure(
            f"Invalid duration format '{segment_time}'. Use HH:MM:SS or seconds."
        )
    return value


def converted_output_path(input_path: PathLike, target_format: VideoFormat) -> Path:
    stem = Path(input_path).stem
    return sibling_path(input_path, f"{stem}{CONVERTED_SUFFIX}.{target_format.extension}")


def split_output_pattern(input_path: PathLike) -> Path:
    extension = file_extension(input_path)
    if not extension:
        raise ValidationFailure(
            f"Cannot split '{Path(input_path).name}': the file has no extension to name the segments after."
        )
    stem = Path(input_path).stem
    return sibling_path(input_path, f"{stem}-{SEGMENT_COUNTER_PATTERN}.{extension}")


def audio_output_path(input_path: PathLike, ordinal: int, audio_format: AudioFormat) -> Path:
    stem = Path(input_path).stem
    return sibling_path(input_path, f"{stem}{AUDIO_OUTPUT_INFIX}{ordinal}.{audio_format.extension}")


def subtitle_output_paths(
    input_path: PathLike, streams: Sequence[SubtitleStream]
) -> List[Path]:
    """
    Names one `.srt` file per subtitle stream after its language tag.

    Repeated languages get the absolute stream index appended from their
    second occurrence on, because the extractions run in parallel and must not
    write the same file.
    """
    stem = Path(input_path).stem
    seen: Dict[str, int] = {}
    paths = []
    for stream in streams:
        seen[stream.language] = seen.get(stream.language, 0) + 1
        discriminator = stream.language
        if seen[stream.language] > 1:
            discriminator = f"{stream.language}-{stream.index}"
        paths.append(sibling_path(input_path, f"{stem}-{discriminator}.{SUBTITLE_OUTPUT_EXTENSION}"))
    return paths


class CommandBuilder:
    """Builds argument vectors for every supported operation."""

    def __init__(self, resolver: ToolResolver):
        self.resolver = resolver

    def convert(self, input_path: PathLike, target_format: VideoFormat) -> Command:
        output_path = converted_output_path(input_path, target_format)
        return (
            self.resolver.resolve(Tool.FFMPEG),
            OVERWRITE, INPUT, str(input_path),
            MAP, ALL_STREAMS,
            "-c:v", "copy",
            "-c:a", "copy",
            *subtitle_codec_args(target_format),
            str(output_path),
        )

    def split(self, input_path: PathLike, segment_time: str) -> Command:
        segment_time = validate_segment_time(segment_time)
        output_pattern = split_output_pattern(input_path)
        return (
            self.resolver.resolve(Tool.FFMPEG),
            OVERWRITE, INPUT, str(input_path),
            "-c", "copy",
            MAP, ALL_STREAMS,
            "-segment_time", segment_time,
            "-f", "segment",
            "-reset_timestamps", "1",
            str(output_pattern),
        )

    def merge(self, list_file: PathLike, output_path: PathLike) -> Command:
        # -safe 0 admits absolute paths in the list file
        return (
            self.resolver.resolve(Tool.FFMPEG),
            "-f", "concat",
            "-safe", "0",
            INPUT, str(list_file),
            "-c", "copy",
            str(output_path),
        )

    def probe_streams(self, input_path: PathLike) -> Command:
        return (
            self.resolver.resolve(Tool.FFPROBE),
            "-v", "quiet",
            "-print_format", "json",
            "-show_streams",
            str(input_path),
        )

    def extract_audio(
        self, input_path: PathLike, ordinal: int, audio_format: AudioFormat
    ) -> Command:
        return (
            self.resolver.resolve(Tool.FFMPEG),
            OVERWRITE, INPUT, str(input_path),
            MAP, f"0:a:{ordinal}",
            *audio_bitrate_args(audio_format),
            str(audio_output_path(input_path, ordinal, audio_format)),
        )

    def extract_subtitle(
        self, input_path: PathLike, stream: SubtitleStream, output_path: PathLike
    ) -> Command:
        return (
            self.resolver.resolve(Tool.FFMPEG),
            OVERWRITE, INPUT, str(input_path),
            MAP, f"0:{stream.index}",
            "-c:s", SUBTITLE_OUTPUT_CODEC,
            str(output_path),
        )

    def read_properties(self, input_path: PathLike) -> Command:
        return (self.resolver.resolve(Tool.MKVMERGE), IDENTIFY_JSON, str(input_path))

    def edit_properties(
        self, input_path: PathLike, title: str, updates: Sequence[TrackUpdate]
    ) -> Command:
        command = [
            self.resolver.resolve(Tool.MKVPROPEDIT),
            str(input_path),
            EDIT, "info",
            SET, f"title={title}",
        ]
        # mkvpropedit applies --set to the most recent --edit; keep name, enabled, default order
        for update in updates:
            command += [
                EDIT, f"track:{update.selector}",
                SET, f"name={update.name}",
                SET, f"flag-enabled={int(update.enabled)}",
                SET, f"flag-default={int(update.default)}",
            ]
        return tuple(command)

    def remove_tracks(self, spec: TrackRemovalSpec) -> Command:
        command = [self.resolver.resolve(Tool.MKVMERGE), OUTPUT_FILE, str(spec.output_path)]
        command += _track_selection(spec.video_ids, KEEP_VIDEO, NO_VIDEO)
        command += _track_selection(spec.audio_ids, KEEP_AUDIO, NO_AUDIO)
        command += _track_selection(spec.subtitle_ids, KEEP_SUBTITLES, NO_SUBTITLES)
        # attachments (fonts, cover art) are never carried over
        command.append(NO_ATTACHMENTS)
        command.append(str(spec.input_path))
        return tuple(command)


def _track_selection(keep_ids: Sequence[int], keep_flag: str, drop_all_flag: str) -> List[str]:
    if not keep_ids:
        return [drop_all_flag]
    return [keep_flag, ",".join(str(track_id) for track_id in keep_ids)]
