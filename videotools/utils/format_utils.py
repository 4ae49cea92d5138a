"""
This module contains helper functions for formatting data into human-readable strings.
These functions are used in progress messages and logs to present commands and
captured tool output in a clear and consistent way.
"""
import os
import shlex
import subprocess
from typing import Iterable


def display_command(command: Iterable[str]) -> str:
    """
    Returns a copy-pasteable rendering of an argument vector.

    The rendering is for display only. Commands are always executed as an
    explicit argv list, never through a shell.

    Args:
        command: The argument vector.

    Returns:
        The command quoted for the current platform's shell, e.g.
        `ffmpeg -y -i 'my clip.mp4' ...` on POSIX systems.
    """
    parts = [str(part) for part in command]
    if os.name == "nt":
        return subprocess.list2cmdline(parts)
    return shlex.join(parts)


def tail_lines(text: str, max_lines: int) -> str:
    """
    Keeps the last `max_lines` lines of the stripped `text`.

    Used to quote the end of a long merged output (where ffmpeg reports the
    actual error) without repeating its banner.
    """
    lines = text.strip().splitlines()
    if len(lines) > max_lines:
        lines = ["...", *lines[-max_lines:]]
    return "\n".join(lines)
