"""Tests for the external tool verification."""
import subprocess
from unittest.mock import patch

from videotools.domain.tools import Tool
from videotools.utils.tool_check import ToolCheck


class TestToolCheck:
    def test_version_flags(self, resolver):
        completed = subprocess.CompletedProcess([], 0, stdout="mkvmerge v80.0\n", stderr="")
        with patch("videotools.utils.tool_check.subprocess.run", return_value=completed) as run:
            assert ToolCheck.verify(resolver, Tool.MKVMERGE)
            assert ToolCheck.verify(resolver, Tool.FFPROBE)

        assert run.call_args_list[0].args[0] == ["mkvmerge", "--version"]
        assert run.call_args_list[1].args[0] == ["/opt/videotools/library/ffprobe", "-version"]

    def test_missing_tool(self, resolver):
        with patch("videotools.utils.tool_check.subprocess.run", side_effect=FileNotFoundError()):
            assert not ToolCheck.verify(resolver, Tool.FFMPEG)

    def test_failing_tool(self, resolver):
        error = subprocess.CalledProcessError(1, ["ffmpeg"], stderr="broken")
        with patch("videotools.utils.tool_check.subprocess.run", side_effect=error):
            assert not ToolCheck.verify(resolver, Tool.FFMPEG)

    def test_run_all_checks_every_tool(self, resolver):
        with patch.object(ToolCheck, "verify", side_effect=[True, True, False, True]) as verify:
            assert not ToolCheck.run_all(resolver)
        assert verify.call_count == len(Tool)
