"""
The external command-line tools driven by the application, and the per-tool
policies the process runner and the outcome classifier apply to them.
"""
from enum import Enum, auto
from typing import assert_never


class ChannelMode(Enum):
    # stderr is redirected into stdout before launch; one drain task.
    MERGED = auto()
    # stdout and stderr are drained by separate tasks.
    SEPARATE = auto()


class ExitPolicy(Enum):
    # 0 is success, anything else is failure.
    DEFAULT = auto()
    # 0 is success, 1 with a warning marker on stderr is success-with-warnings.
    WARNING_TOLERANT = auto()


class Tool(Enum):
    """
    The four external executables.

    ffmpeg and ffprobe print line-oriented progress and diagnostics, so their
    channels are merged. The MKVToolNix pair keeps stderr separate because its
    exit code 1 is only a success when stderr carries a warning marker.
    """

    FFMPEG = "ffmpeg"
    FFPROBE = "ffprobe"
    MKVMERGE = "mkvmerge"
    MKVPROPEDIT = "mkvpropedit"

    @property
    def executable_name(self) -> str:
        return self.value

    @property
    def channel_mode(self) -> ChannelMode:
        match self:
            case Tool.FFMPEG | Tool.FFPROBE:
                return ChannelMode.MERGED
            case Tool.MKVMERGE | Tool.MKVPROPEDIT:
                return ChannelMode.SEPARATE
            case _:
                assert_never(self)

    @property
    def exit_policy(self) -> ExitPolicy:
        match self:
            case Tool.FFMPEG | Tool.FFPROBE:
                return ExitPolicy.DEFAULT
            case Tool.MKVMERGE | Tool.MKVPROPEDIT:
                return ExitPolicy.WARNING_TOLERANT
            case _:
                assert_never(self)

    @property
    def version_flag(self) -> str:
        match self:
            case Tool.FFMPEG | Tool.FFPROBE:
                return "-version"
            case Tool.MKVMERGE | Tool.MKVPROPEDIT:
                return "--version"
            case _:
                assert_never(self)
