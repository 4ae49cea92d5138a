"""
Extracts every audio track of a video into its own file.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..config.common import MSG_AUDIO_DONE, MSG_AUDIO_FAILED, MSG_NO_AUDIO_TRACKS
from ..domain.formats import AudioFormat
from ..domain.requests import AudioStream
from ..utils.command_builder import Command
from .logging_service import ProgressListener
from .stream_probe import StreamExtraction, StreamInfo, audio_streams


class AudioExtractor(StreamExtraction):
    name = "extract-audio"
    no_streams_message = MSG_NO_AUDIO_TRACKS
    done_message = MSG_AUDIO_DONE
    failed_message = MSG_AUDIO_FAILED

    def execute(
        self,
        input_path: Union[str, Path],
        audio_format: AudioFormat,
        listener: Optional[ProgressListener] = None,
    ) -> Future:
        """
        Writes track N to `<stem>-audio-N.<ext>` beside the input, for every
        audio track found. Lossy targets are encoded at a fixed 320k.
        """
        return self.extract(input_path, listener, audio_format=audio_format)

    def select_streams(self, streams: Sequence[StreamInfo]) -> List[AudioStream]:
        return audio_streams(streams)

    def build_commands(
        self, input_path, selected: Sequence[AudioStream], audio_format: AudioFormat = AudioFormat.AAC
    ) -> List[Command]:
        return [
            self.builder.extract_audio(input_path, stream.ordinal, audio_format)
            for stream in selected
        ]
