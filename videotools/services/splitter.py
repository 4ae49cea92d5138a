"""
Splits a video into fixed-length segments with ffmpeg's segment muxer.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from ..domain.tools import Tool
from .logging_service import ProgressListener
from .operation_base import Operation


class VideoSplitter(Operation):
    name = "split"

    def split(
        self,
        input_path: Union[str, Path],
        segment_time: str,
        listener: Optional[ProgressListener] = None,
    ) -> Future:
        """
        Cuts `input_path` into segments of `segment_time` (`HH:MM:SS` or
        seconds), written as `<stem>-0000.<ext>`, `<stem>-0001.<ext>`, ...

        A malformed segment length or an input without extension is rejected
        before ffmpeg is started.
        """
        try:
            command = self.builder.split(input_path, segment_time)
        except Exception as e:
            return self.reject(e, listener)

        logger.info(f"Splitting {Path(input_path).name} every {segment_time.strip()}")
        return self.finish(self.run_tool(command, Tool.FFMPEG, listener), listener)
