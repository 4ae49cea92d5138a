"""
Extracts every subtitle track of a video into an SRT file named after its
language.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..config.common import MSG_NO_SUBTITLE_TRACKS, MSG_SUBTITLES_DONE, MSG_SUBTITLES_FAILED
from ..domain.requests import SubtitleStream
from ..utils.command_builder import Command, subtitle_output_paths
from .logging_service import ProgressListener
from .stream_probe import StreamExtraction, StreamInfo, subtitle_streams


class SubtitleExtractor(StreamExtraction):
    name = "extract-subtitles"
    no_streams_message = MSG_NO_SUBTITLE_TRACKS
    done_message = MSG_SUBTITLES_DONE
    failed_message = MSG_SUBTITLES_FAILED

    def execute(
        self, input_path: Union[str, Path], listener: Optional[ProgressListener] = None
    ) -> Future:
        return self.extract(input_path, listener)

    def select_streams(self, streams: Sequence[StreamInfo]) -> List[SubtitleStream]:
        return subtitle_streams(streams)

    def build_commands(self, input_path, selected: Sequence[SubtitleStream]) -> List[Command]:
        outputs = subtitle_output_paths(input_path, selected)
        return [
            self.builder.extract_subtitle(input_path, stream, output)
            for stream, output in zip(selected, outputs)
        ]
