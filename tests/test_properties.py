"""Tests for the MKV property model parsed from `mkvmerge -J`."""
import json

import pytest

from videotools.domain.exceptions import ParseFailure
from videotools.domain.formats import TrackType
from videotools.domain.properties import MkvPropertyInfo


def _payload(tracks, title="Title"):
    return json.dumps({"container": {"properties": {"title": title}}, "tracks": tracks})


class TestMkvPropertyInfo:
    def test_selectors_are_counted_per_type(self):
        info = MkvPropertyInfo.from_json(
            _payload(
                [
                    {"id": 0, "type": "video", "codec": "HEVC"},
                    {"id": 1, "type": "audio", "codec": "AAC"},
                    {"id": 2, "type": "audio", "codec": "AC-3"},
                    {"id": 3, "type": "subtitles", "codec": "SubRip/SRT"},
                    {"id": 4, "type": "buttons", "codec": "HDMV"},
                ]
            )
        )
        assert [track.selector for track in info.tracks] == ["v1", "a1", "a2", "s1", "@5"]
        assert info.tracks[4].type is TrackType.UNKNOWN
        assert [track.id for track in info.tracks_of(TrackType.AUDIO)] == [1, 2]

    def test_property_defaults(self):
        track = MkvPropertyInfo.from_json(_payload([{"id": 0, "type": "audio", "codec": "AAC"}])).tracks[0]
        assert track.name == ""
        assert track.default is False
        assert track.enabled is True
        assert track.language == "und"

    def test_properties_are_read(self):
        track_json = {
            "id": 1,
            "type": "subtitles",
            "codec": "SubRip/SRT",
            "properties": {
                "track_name": "Forced",
                "default_track": True,
                "enabled_track": False,
                "language": "ger",
            },
        }
        track = MkvPropertyInfo.from_json(_payload([track_json])).tracks[0]
        assert (track.name, track.default, track.enabled, track.language) == ("Forced", True, False, "ger")

    def test_missing_title_is_empty(self):
        info = MkvPropertyInfo.from_json(json.dumps({"tracks": []}))
        assert info.title == ""
        assert info.tracks == ()

    @pytest.mark.parametrize(
        "payload",
        ["", "not json", json.dumps({"container": {}}), json.dumps({"tracks": [{"type": "video"}]})],
    )
    def test_malformed_payload(self, payload):
        with pytest.raises(ParseFailure, match="Failed to parse MKV properties from JSON"):
            MkvPropertyInfo.from_json(payload)
