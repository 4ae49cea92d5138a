"""
Configuration settings related to audio extraction.

This module defines the bitrate used for lossy audio targets and the naming
convention of extracted audio files.
"""

# ======================================================================================
# Audio Encoding Parameters
# ======================================================================================

# Bitrate applied to lossy targets (AAC, MP3). 320 kbps keeps extraction close to
# transparent; lossless targets such as WAV take no bitrate flag at all.
LOSSY_AUDIO_BITRATE = "320k"


# ======================================================================================
# Output Naming
# ======================================================================================

# Infix between the source base name and the audio ordinal, e.g. "movie-audio-0.mp3".
AUDIO_OUTPUT_INFIX = "-audio-"
