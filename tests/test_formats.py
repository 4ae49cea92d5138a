"""Tests for the format and track type enums."""
import pytest

from videotools.domain.formats import AudioFormat, TrackType, VideoFormat


class TestVideoFormat:
    @pytest.mark.parametrize("text", ["mov", "MOV", ".mov"])
    def test_lookup_is_case_insensitive(self, text):
        assert VideoFormat.from_extension(text) is VideoFormat.MOV

    @pytest.mark.parametrize("text", ["", "avi"])
    def test_unknown_extension_raises(self, text):
        with pytest.raises(ValueError):
            VideoFormat.from_extension(text)


class TestAudioFormat:
    def test_lookup(self):
        assert AudioFormat.from_extension("Mp3") is AudioFormat.MP3

    @pytest.mark.parametrize("text", [None, "", "  ", "flac"])
    def test_unknown_extension_is_none(self, text):
        assert AudioFormat.from_extension(text) is None


class TestTrackType:
    def test_from_string(self):
        assert TrackType.from_string("Subtitles") is TrackType.SUBTITLES
        assert TrackType.from_string(None) is TrackType.UNKNOWN
        assert TrackType.from_string("buttons") is TrackType.UNKNOWN
