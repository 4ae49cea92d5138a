"""
Closed sets of container formats, audio formats and track types.

Every decision that depends on one of these enums (subtitle codec, audio
bitrate, track selection flags) is written as an exhaustive `match` ending in
`assert_never`, so a type checker flags each decision point when a new member
is added.
"""
from enum import Enum
from typing import Optional


class VideoFormat(Enum):
    """Target containers supported by the converter."""

    MP4 = ("mp4", "MPEG-4 Part 14")
    MKV = ("mkv", "Matroska Multimedia Container")
    MOV = ("mov", "QuickTime File Format")

    def __init__(self, extension: str, description: str):
        self.extension = extension
        self.description = description

    def __str__(self) -> str:
        return f"{self.name} ({self.description})"

    @classmethod
    def from_extension(cls, extension: str) -> "VideoFormat":
        """
        Finds a format by file extension, case-insensitively.

        Raises:
            ValueError: If `extension` is empty or names no supported format.
        """
        if not extension:
            raise ValueError("Extension cannot be empty.")
        wanted = extension.lower().lstrip(".")
        for video_format in cls:
            if video_format.extension == wanted:
                return video_format
        raise ValueError(f"No video format found for extension: {extension}")


class AudioFormat(Enum):
    """Target formats supported by the audio extractor."""

    AAC = ("aac", "Advanced Audio Coding")
    MP3 = ("mp3", "MPEG Audio Layer III")
    WAV = ("wav", "Waveform Audio File Format")

    def __init__(self, extension: str, description: str):
        self.extension = extension
        self.description = description

    def __str__(self) -> str:
        return f"{self.name} ({self.description})"

    @classmethod
    def from_extension(cls, extension: Optional[str]) -> Optional["AudioFormat"]:
        """Finds a format by file extension, case-insensitively; None when unknown."""
        if not extension or not extension.strip():
            return None
        wanted = extension.strip().lower().lstrip(".")
        for audio_format in cls:
            if audio_format.extension == wanted:
                return audio_format
        return None


class TrackType(Enum):
    """Track kinds reported by mkvmerge's JSON identification."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLES = "subtitles"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, text: Optional[str]) -> "TrackType":
        # Types mkvmerge may add later (e.g. "buttons") fall back to UNKNOWN.
        for track_type in cls:
            if text and track_type.value == text.lower():
                return track_type
        return cls.UNKNOWN
