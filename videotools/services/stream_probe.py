"""
Stream discovery with ffprobe and the probe-then-extract fan-out shared by the
audio and subtitle extractors.

An extraction runs as a small task graph: one ffprobe run lists the streams,
its result fans out into one ffmpeg run per matching stream, and a join waits
for every one of them before the single terminal notification is made. The
first failure (by completion order) decides the error message, but the other
extractions still run to completion since a running process is never
cancelled.
"""
import json
from concurrent.futures import Future
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from ..config.common import MSG_PROBE_EMPTY, MSG_PROBE_FAILED, MSG_PROBE_MALFORMED
from ..config.video import UNDETERMINED_LANGUAGE
from ..domain.exceptions import ParseFailure
from ..domain.requests import AudioStream, SubtitleStream
from ..domain.results import Outcome
from ..domain.tools import Tool
from ..utils.command_builder import Command
from ..utils.futures import completed, map_error, then, when_all
from .logging_service import NullListener, ProgressListener
from .operation_base import Operation, rephrased

PathLike = Union[str, Path]
StreamInfo = Dict[str, Any]


def parse_streams(payload: Optional[str]) -> List[StreamInfo]:
    """
    Extracts the `streams` array from ffprobe's JSON output.

    Raises:
        ParseFailure: If the output is empty, is not JSON or has no `streams`
                      array.
    """
    if not payload or not payload.strip():
        raise ParseFailure(MSG_PROBE_EMPTY)
    try:
        root = json.loads(payload)
        streams = root["streams"]
        if not isinstance(streams, list):
            raise TypeError("'streams' is not an array")
    except (ValueError, KeyError, TypeError) as e:
        raise ParseFailure(MSG_PROBE_MALFORMED.format(error=e)) from e
    return streams


def audio_streams(streams: Sequence[StreamInfo]) -> List[AudioStream]:
    """Audio streams in file order, numbered among audio streams only (`0:a:N`)."""
    audio = [stream for stream in streams if stream.get("codec_type") == "audio"]
    return [AudioStream(ordinal) for ordinal in range(len(audio))]


def subtitle_streams(streams: Sequence[StreamInfo]) -> List[SubtitleStream]:
    """Subtitle streams with their absolute index and language tag (`und` if absent)."""
    found = []
    for stream in streams:
        if stream.get("codec_type") != "subtitle":
            continue
        tags = stream.get("tags") or {}
        language = tags.get("language") or UNDETERMINED_LANGUAGE
        try:
            index = int(stream["index"])
        except (KeyError, TypeError, ValueError) as e:
            raise ParseFailure(MSG_PROBE_MALFORMED.format(error=e)) from e
        found.append(SubtitleStream(index=index, language=language))
    return found


class StreamExtraction(Operation):
    """
    Base class of the fan-out extractors.

    Subclasses pick the streams they handle out of the probe result, build one
    command per stream and name their terminal messages.
    """

    no_streams_message: str = ""
    done_message: str = ""
    failed_message: str = "{error}"

    def probe(self, input_path: PathLike, listener: ProgressListener) -> "Future[List[StreamInfo]]":
        """Lists the streams of `input_path`; fails with a probe-specific message."""
        command = self.builder.probe_streams(input_path)
        probed = map_error(
            self.run_tool(command, Tool.FFPROBE, listener),
            lambda error: rephrased(error, MSG_PROBE_FAILED.format(error=error)),
        )
        return then(probed, lambda outcome: parse_streams(outcome.payload))

    def select_streams(self, streams: Sequence[StreamInfo]) -> List[Any]:
        raise NotImplementedError

    def build_commands(self, input_path: PathLike, selected: Sequence[Any], **options) -> List[Command]:
        raise NotImplementedError

    def extract(
        self,
        input_path: PathLike,
        listener: Optional[ProgressListener] = None,
        **options,
    ) -> Future:
        """
        Probes `input_path` and extracts every matching stream in parallel.

        Returns:
            A future completed after the terminal call. It holds the list of
            extraction `Outcome`s (empty when the input has no matching
            stream) or the first failure.
        """
        listener = listener or NullListener()
        try:
            probed = self.probe(input_path, listener)
        except Exception as e:
            return self.reject(e, listener)

        def _fan_out(streams: List[StreamInfo]) -> Future:
            selected = self.select_streams(streams)
            if not selected:
                logger.info(f"{self.name}: no matching streams in {Path(input_path).name}")
                return completed([])

            logger.info(f"{self.name}: extracting {len(selected)} stream(s) from {Path(input_path).name}")
            commands = self.build_commands(input_path, selected, **options)
            extractions = [self.run_tool(command, Tool.FFMPEG, listener) for command in commands]
            return map_error(
                when_all(extractions),
                lambda error: rephrased(error, self.failed_message.format(error=error)),
            )

        return self.finish(then(probed, _fan_out), listener, self._summary)

    def _summary(self, outcomes: List[Outcome]) -> str:
        return self.done_message if outcomes else self.no_streams_message
