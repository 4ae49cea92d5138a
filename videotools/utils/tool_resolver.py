"""
This module provides the ToolResolver class, which maps a logical `Tool` to the
string placed at the head of an argument vector.
"""
import sys
from pathlib import Path
from typing import Mapping, Optional, assert_never

from loguru import logger

from ..domain.tools import Tool


class ToolResolver:
    """
    Resolves tools to an invocable path or bare command name.

    Resolution order:
    1. An explicit per-tool override from the user configuration.
    2. The platform policy. On Windows every tool resolves to the bundled
       executable inside `library_dir`. Elsewhere the MKVToolNix pair resolves
       to its bare command name (looked up on the PATH at launch time) while
       ffmpeg and ffprobe resolve to the bundled executables.

    Resolution never fails. A missing executable only surfaces when the process
    runner tries to launch it.
    """

    def __init__(
        self,
        library_dir: Path,
        overrides: Optional[Mapping[str, str]] = None,
        is_windows: Optional[bool] = None,
    ):
        self.library_dir = Path(library_dir)
        self.overrides = {name.lower(): path for name, path in (overrides or {}).items()}
        self.is_windows = sys.platform == "win32" if is_windows is None else is_windows

        unknown = set(self.overrides) - {tool.executable_name for tool in Tool}
        if unknown:
            logger.warning(f"Ignoring tool overrides for unknown tools: {sorted(unknown)}")

    def executable_name(self, tool: Tool) -> str:
        return f"{tool.executable_name}.exe" if self.is_windows else tool.executable_name

    def resolve(self, tool: Tool) -> str:
        override = self.overrides.get(tool.executable_name)
        if override:
            return override

        if not self.is_windows:
            match tool:
                case Tool.MKVMERGE | Tool.MKVPROPEDIT:
                    return self.executable_name(tool)
                case Tool.FFMPEG | Tool.FFPROBE:
                    pass
                case _:
                    assert_never(tool)

        return str(self.library_dir / self.executable_name(tool))
