"""
Helpers for deriving output paths and for the concat demuxer's list file.
"""
import os
import tempfile
from pathlib import Path
from typing import Iterable, Sequence, Union

from loguru import logger

from ..config.video import MERGE_LIST_PREFIX, MERGE_LIST_SUFFIX


def sibling_path(input_path: Union[str, Path], file_name: str) -> Path:
    """
    Places `file_name` in the directory of `input_path`.

    A bare file name has `.` as its parent, which pathlib collapses, so the
    result is then relative to the current directory with no leading component.
    """
    return Path(input_path).parent / file_name


def file_extension(input_path: Union[str, Path]) -> str:
    """Returns the extension without its dot, or an empty string."""
    return Path(input_path).suffix.lstrip(".")


def escape_concat_path(path: Union[str, Path]) -> str:
    """
    Quotes a path for a `file '...'` line of the concat demuxer.

    Single quotes cannot be escaped inside a single-quoted string, so each one
    closes the string, emits an escaped quote and reopens it:
    `my 'clip'.mp4` becomes `'my '\\''clip'\\''.mp4'`.
    """
    return "'" + str(path).replace("'", "'\\''") + "'"


def merge_list_lines(clips: Iterable[Union[str, Path]]) -> str:
    """
    Builds the list content, one absolute path per clip.

    The concat demuxer resolves relative entries against the list file's own
    directory, which is the temporary directory and not the caller's.
    """
    return "".join(f"file {escape_concat_path(Path(clip).absolute())}\n" for clip in clips)


def write_merge_list(clips: Sequence[Union[str, Path]]) -> Path:
    """
    Writes the concat list for `clips` to a new UTF-8 temporary file.

    The caller owns the file and is expected to delete it once the merge has
    finished, whatever its outcome.

    Raises:
        OSError: If the file cannot be created or written.
    """
    fd, name = tempfile.mkstemp(prefix=MERGE_LIST_PREFIX, suffix=MERGE_LIST_SUFFIX)
    list_path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(merge_list_lines(clips))
    except OSError:
        list_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote concat list for {len(clips)} clip(s) to {list_path}")
    return list_path
