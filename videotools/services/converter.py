"""
Converts a video to another container by stream copy.

Nothing is re-encoded. Video and audio are copied as-is and only the subtitle
streams are transcoded when the target container cannot hold them verbatim.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from ..domain.formats import VideoFormat
from ..domain.tools import Tool
from .logging_service import ProgressListener
from .operation_base import Operation


class VideoConverter(Operation):
    name = "convert"

    def convert(
        self,
        input_path: Union[str, Path],
        target_format: VideoFormat,
        listener: Optional[ProgressListener] = None,
    ) -> Future:
        """
        Remuxes `input_path` into `target_format` next to the input, as
        `<stem>-converted.<ext>`.

        Returns:
            A future holding the `Outcome` of the ffmpeg run, completed after
            the listener's terminal call.
        """
        try:
            command = self.builder.convert(input_path, target_format)
        except Exception as e:
            return self.reject(e, listener)

        logger.info(f"Converting {Path(input_path).name} to {target_format}")
        return self.finish(self.run_tool(command, Tool.FFMPEG, listener), listener)
