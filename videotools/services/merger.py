"""
Joins video clips end to end with ffmpeg's concat demuxer.

The clips are written to a temporary list file which lives exactly as long as
the ffmpeg run. The clips must share codecs and stream parameters; that is not
checked here, and ffmpeg reports it when they do not.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from ..config.common import MSG_CLEANUP_FAILED, MSG_MERGE_LIST_FAILED, MSG_NO_CLIPS
from ..domain.exceptions import ValidationFailure, VideoToolsException
from ..domain.tools import Tool
from ..utils.file_utils import write_merge_list
from .logging_service import NullListener, ProgressListener
from .operation_base import Operation

PathLike = Union[str, Path]


class VideoClipsMerger(Operation):
    name = "merge"

    def merge(
        self,
        clips: Sequence[PathLike],
        output_path: PathLike,
        listener: Optional[ProgressListener] = None,
    ) -> Future:
        """
        Concatenates `clips`, in order, into `output_path`.

        An empty clip list is rejected synchronously. The list file is deleted
        before the terminal notification whatever the outcome; failing to
        delete it is reported as a progress line only.
        """
        listener = listener or NullListener()
        if not clips:
            return self.reject(ValidationFailure(MSG_NO_CLIPS), listener)

        try:
            list_file = write_merge_list(clips)
        except OSError as e:
            return self.reject(VideoToolsException(MSG_MERGE_LIST_FAILED.format(error=e)), listener)

        try:
            command = self.builder.merge(list_file, output_path)
        except Exception as e:
            self._delete_list_file(list_file, listener)
            return self.reject(e, listener)

        logger.info(f"Merging {len(clips)} clip(s) into {output_path}")
        return self.finish(
            self.run_tool(command, Tool.FFMPEG, listener),
            listener,
            before_terminal=lambda: self._delete_list_file(list_file, listener),
        )

    @staticmethod
    def _delete_list_file(list_file: Path, listener: ProgressListener) -> None:
        try:
            list_file.unlink()
        except OSError as e:
            message = MSG_CLEANUP_FAILED.format(path=list_file, error=e)
            logger.warning(message)
            listener.on_progress(message)
