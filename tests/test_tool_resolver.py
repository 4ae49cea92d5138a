"""Tests for ToolResolver platform policy and overrides."""
from pathlib import Path

import pytest

from videotools.domain.tools import Tool
from videotools.utils.tool_resolver import ToolResolver

LIBRARY = Path("/opt/vt/library")


class TestPlatformPolicy:
    def test_windows_resolves_everything_to_library(self):
        resolver = ToolResolver(LIBRARY, is_windows=True)
        for tool in Tool:
            assert resolver.resolve(tool) == str(LIBRARY / f"{tool.value}.exe")

    @pytest.mark.parametrize("tool", [Tool.FFMPEG, Tool.FFPROBE])
    def test_posix_ffmpeg_family_is_bundled(self, tool):
        resolver = ToolResolver(LIBRARY, is_windows=False)
        assert resolver.resolve(tool) == str(LIBRARY / tool.value)

    @pytest.mark.parametrize("tool", [Tool.MKVMERGE, Tool.MKVPROPEDIT])
    def test_posix_mkvtoolnix_uses_path_lookup(self, tool):
        resolver = ToolResolver(LIBRARY, is_windows=False)
        assert resolver.resolve(tool) == tool.value

    def test_missing_library_does_not_fail_resolution(self, tmp_path):
        resolver = ToolResolver(tmp_path / "does-not-exist", is_windows=False)
        assert resolver.resolve(Tool.FFMPEG).endswith("ffmpeg")


class TestOverrides:
    def test_override_wins(self):
        resolver = ToolResolver(LIBRARY, {"mkvmerge": "/usr/local/bin/mkvmerge"}, is_windows=True)
        assert resolver.resolve(Tool.MKVMERGE) == "/usr/local/bin/mkvmerge"
        assert resolver.resolve(Tool.MKVPROPEDIT) == str(LIBRARY / "mkvpropedit.exe")

    def test_override_names_are_case_insensitive(self):
        resolver = ToolResolver(LIBRARY, {"FFmpeg": "/bin/ffmpeg"}, is_windows=False)
        assert resolver.resolve(Tool.FFMPEG) == "/bin/ffmpeg"

    def test_unknown_override_is_ignored(self):
        resolver = ToolResolver(LIBRARY, {"handbrake": "/bin/hb"}, is_windows=False)
        assert resolver.resolve(Tool.FFPROBE) == str(LIBRARY / "ffprobe")
