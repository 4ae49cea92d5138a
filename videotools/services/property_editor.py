"""
Reads and edits the title and track properties of MKV files.

Properties are read with `mkvmerge -J` and written in place with
`mkvpropedit`. The track selectors used for writing are the ones generated
when the properties were read; see `videotools.domain.properties`.
"""
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from ..domain.properties import MkvPropertyInfo
from ..domain.requests import TrackUpdate
from ..domain.results import Outcome
from ..domain.tools import Tool
from ..utils.futures import then
from .logging_service import NullListener, ProgressListener
from .operation_base import Operation

PathLike = Union[str, Path]


class MkvPropertyEditor(Operation):
    name = "properties"

    def get_properties(
        self, input_path: PathLike, listener: Optional[ProgressListener] = None
    ) -> "Future[MkvPropertyInfo]":
        """
        Reads the global title and the tracks of `input_path`.

        Returns:
            A future holding the parsed `MkvPropertyInfo`. It fails with
            `ParseFailure` when mkvmerge's JSON cannot be understood.
        """
        try:
            command = self.builder.read_properties(input_path)
        except Exception as e:
            return self.reject(e, listener)

        logger.info(f"Reading properties of {Path(input_path).name}")
        parsed = then(
            self.run_tool(command, Tool.MKVMERGE, listener),
            lambda outcome: (outcome, MkvPropertyInfo.from_json(outcome.payload or "")),
        )
        return then(
            self.finish(parsed, listener, lambda pair: pair[0].message),
            lambda pair: pair[1],
        )

    def update_properties(
        self,
        input_path: PathLike,
        title: Optional[str],
        updates: Sequence[TrackUpdate],
        listener: Optional[ProgressListener] = None,
    ) -> Future:
        """
        Sets the global title and, per entry of `updates`, the name, enabled
        flag and default flag of one track. The file is modified in place.

        mkvpropedit always rewrites the title, so a `title` of None first reads
        the current one and writes it back unchanged.
        """
        listener = listener or NullListener()
        if title is None:
            try:
                read_command = self.builder.read_properties(input_path)
            except Exception as e:
                return self.reject(e, listener)

            logger.info(f"Reading current title of {Path(input_path).name}")
            current = then(
                self.run_tool(read_command, Tool.MKVMERGE, listener),
                lambda outcome: MkvPropertyInfo.from_json(outcome.payload or ""),
            )
            return self.finish(
                then(current, lambda info: self._write(input_path, info.title, updates, listener)),
                listener,
            )

        try:
            return self.finish(self._write(input_path, title, updates, listener), listener)
        except Exception as e:
            return self.reject(e, listener)

    def _write(
        self,
        input_path: PathLike,
        title: str,
        updates: Sequence[TrackUpdate],
        listener: ProgressListener,
    ) -> "Future[Outcome]":
        command = self.builder.edit_properties(input_path, title, updates)
        logger.info(f"Updating properties of {Path(input_path).name} ({len(updates)} track(s))")
        return self.run_tool(command, Tool.MKVPROPEDIT, listener)
