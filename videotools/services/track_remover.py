"""
Remuxes an MKV file keeping only the selected tracks.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import Optional

from loguru import logger

from ..domain.requests import TrackRemovalSpec
from ..domain.tools import Tool
from .logging_service import ProgressListener
from .operation_base import Operation


class MkvTrackRemover(Operation):
    """
    Writes a copy of the input that contains only the tracks listed in a
    `TrackRemovalSpec`. Attachments are always dropped. The input file itself
    is never modified.
    """

    name = "remove-tracks"

    def remove_tracks(
        self, spec: TrackRemovalSpec, listener: Optional[ProgressListener] = None
    ) -> Future:
        try:
            command = self.builder.remove_tracks(spec)
        except Exception as e:
            return self.reject(e, listener)

        logger.info(
            f"Remuxing {Path(spec.input_path).name} to {spec.output_path} "
            f"(video={list(spec.video_ids)}, audio={list(spec.audio_ids)}, subtitles={list(spec.subtitle_ids)})"
        )
        return self.finish(self.run_tool(command, Tool.MKVMERGE, listener), listener)
