"""
Configuration settings related to video container operations.

Flag values and filename conventions used by the convert, split, merge and
subtitle extraction command builders.
"""

# --- Convert ---
CONVERTED_SUFFIX = "-converted"
SUBTITLE_CODEC_MOV_TEXT = "mov_text"
SUBTITLE_CODEC_COPY = "copy"

# --- Split ---
# Zero-padded four digit counter understood by the segment muxer.
SEGMENT_COUNTER_PATTERN = "%04d"
# HH:MM:SS with two-digit fields, or a plain number of seconds.
SEGMENT_TIME_REGEX = r"\d{2}:\d{2}:\d{2}|\d+(?:\.\d+)?"

# --- Merge ---
MERGE_LIST_PREFIX = "ffmpeg-merge-list"
MERGE_LIST_SUFFIX = ".txt"

# --- Subtitle Extraction ---
SUBTITLE_OUTPUT_CODEC = "srt"
SUBTITLE_OUTPUT_EXTENSION = "srt"
# ISO 639-2 "undetermined", used when a stream carries no language tag.
UNDETERMINED_LANGUAGE = "und"

# --- Track Removal ---
REMOVE_TRACKS_DEFAULT_SUFFIX = "-new"
MKV_EXTENSION = "mkv"
