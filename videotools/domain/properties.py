"""
The MKV property model, parsed from the JSON document printed by `mkvmerge -J`.

Two track numbering schemes coexist here. `MkvTrack.id` is mkvmerge's 0-based
id and is what track removal uses. `MkvTrack.selector` is the mkvpropedit
selector (`v1`, `a1`, `s1`, ... counted per type, 1-based) and is what property
edits use. They are computed together when the properties are first read and
must not be mixed.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, assert_never

from loguru import logger

from ..config.video import UNDETERMINED_LANGUAGE
from .exceptions import ParseFailure
from .formats import TrackType


@dataclass(frozen=True)
class MkvTrack:
    id: int
    selector: str
    type: TrackType
    codec: str
    name: str = ""
    default: bool = False
    enabled: bool = True
    language: str = UNDETERMINED_LANGUAGE

    @classmethod
    def from_json(cls, track_json: Dict[str, Any], selector: str) -> "MkvTrack":
        properties = track_json.get("properties") or {}
        if not isinstance(properties, dict):
            raise TypeError(f"'properties' of track {track_json.get('id')} is not an object")
        return cls(
            id=int(track_json["id"]),
            selector=selector,
            type=TrackType.from_string(track_json["type"]),
            codec=str(track_json["codec"]),
            name=str(properties.get("track_name", "")),
            default=bool(properties.get("default_track", False)),
            enabled=bool(properties.get("enabled_track", True)),
            language=str(properties.get("language", UNDETERMINED_LANGUAGE)),
        )


@dataclass(frozen=True)
class MkvPropertyInfo:
    """Global title plus the tracks of an MKV container, in file order."""

    title: str
    tracks: Tuple[MkvTrack, ...]

    def tracks_of(self, track_type: TrackType) -> List[MkvTrack]:
        return [track for track in self.tracks if track.type is track_type]

    @classmethod
    def from_json(cls, payload: str) -> "MkvPropertyInfo":
        """
        Parses mkvmerge's identification JSON.

        Raises:
            ParseFailure: If the text is not JSON or lacks the `tracks` array or
                          a required per-track field (`id`, `type`, `codec`).
        """
        try:
            root = json.loads(payload)
            container = root.get("container") or {}
            title = str((container.get("properties") or {}).get("title", ""))

            counters = {TrackType.VIDEO: 0, TrackType.AUDIO: 0, TrackType.SUBTITLES: 0}
            tracks = []
            for track_json in root["tracks"]:
                track_type = TrackType.from_string(track_json["type"])
                match track_type:
                    case TrackType.VIDEO | TrackType.AUDIO | TrackType.SUBTITLES:
                        counters[track_type] += 1
                        selector = f"{_SELECTOR_LETTERS[track_type]}{counters[track_type]}"
                    case TrackType.UNKNOWN:
                        # mkvpropedit addresses other tracks by 1-based track number
                        selector = f"@{int(track_json['id']) + 1}"
                    case _:
                        assert_never(track_type)
                tracks.append(MkvTrack.from_json(track_json, selector))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.debug(f"Unparseable mkvmerge JSON: {payload[:200]!r}")
            raise ParseFailure(f"Failed to parse MKV properties from JSON: {e}") from e

        return cls(title=title, tracks=tuple(tracks))


_SELECTOR_LETTERS = {
    TrackType.VIDEO: "v",
    TrackType.AUDIO: "a",
    TrackType.SUBTITLES: "s",
}
