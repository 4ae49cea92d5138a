"""
Typed operation requests consumed by the command builders.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TrackUpdate:
    """
    New property values for one track of an MKV file.

    `selector` is the mkvpropedit selector established when the file's
    properties were read (`v1`, `a2`, `s1`, `@4`, ...). It is a different
    namespace from the 0-based ids used for track removal and must be reused
    verbatim.
    """

    selector: str
    name: str
    enabled: bool
    default: bool


def _normalize_ids(ids: Optional[Iterable[int]]) -> Tuple[int, ...]:
    return tuple(int(track_id) for track_id in ids) if ids else ()


@dataclass(frozen=True)
class TrackRemovalSpec:
    """
    Which tracks to keep when remuxing an MKV file.

    The id lists use inclusion semantics: the tracks listed are kept and every
    other track of that type is dropped. An empty or None list drops all tracks
    of the type; both are normalized to an empty tuple on construction.
    """

    input_path: PathLike
    output_path: PathLike
    video_ids: Optional[Iterable[int]] = ()
    audio_ids: Optional[Iterable[int]] = ()
    subtitle_ids: Optional[Iterable[int]] = ()

    def __post_init__(self):
        if not str(self.input_path):
            raise ValueError("Input file cannot be empty.")
        if not str(self.output_path):
            raise ValueError("Output file cannot be empty.")
        # frozen dataclass: bypass __setattr__ for the normalized copies
        object.__setattr__(self, "video_ids", _normalize_ids(self.video_ids))
        object.__setattr__(self, "audio_ids", _normalize_ids(self.audio_ids))
        object.__setattr__(self, "subtitle_ids", _normalize_ids(self.subtitle_ids))


@dataclass(frozen=True)
class AudioStream:
    """An audio stream discovered by the probe; `ordinal` counts audio streams only."""

    ordinal: int


@dataclass(frozen=True)
class SubtitleStream:
    """A subtitle stream discovered by the probe; `index` is the absolute stream index."""

    index: int
    language: str
