"""Tests for the per-tool exit code policies."""
import pytest

from videotools.domain.results import Classification, ExecutionResult
from videotools.domain.tools import Tool
from videotools.services.outcome_classifier import classify


def _result(exit_code, output="", errors=""):
    return ExecutionResult(command=("tool",), exit_code=exit_code, output=output, errors=errors)


class TestDefaultPolicy:
    @pytest.mark.parametrize("tool", list(Tool))
    def test_exit_zero_succeeds_for_every_tool(self, tool):
        outcome = classify(tool, _result(0, output="payload"))
        assert outcome.classification is Classification.SUCCESS
        assert outcome.message == "Operation completed successfully."
        assert outcome.payload == "payload"

    def test_nonzero_fails_with_output_details(self):
        outcome = classify(Tool.FFMPEG, _result(1, output="banner\nInvalid data found\n"))
        assert outcome.classification is Classification.FAILURE
        assert outcome.message == "ffmpeg failed with exit code 1.\nDetails:\nbanner\nInvalid data found"
        assert outcome.payload is None

    def test_nonzero_without_output(self):
        outcome = classify(Tool.FFPROBE, _result(255))
        assert outcome.message == "ffprobe failed with exit code 255."

    def test_long_output_is_truncated_to_its_tail(self):
        output = "".join(f"line {i}\n" for i in range(100))
        outcome = classify(Tool.FFMPEG, _result(1, output=output))
        details = outcome.message.split("Details:\n", 1)[1].splitlines()
        assert details[0] == "..."
        assert details[-1] == "line 99"
        assert len(details) == 21


class TestWarningTolerantPolicy:
    @pytest.mark.parametrize("tool", [Tool.MKVMERGE, Tool.MKVPROPEDIT])
    def test_exit_one_with_marker_is_warning_success(self, tool):
        outcome = classify(tool, _result(1, output="{}", errors="Warning: odd timestamps\n"))
        assert outcome.classification is Classification.WARNING_SUCCESS
        assert outcome.message == "Operation completed with warnings."
        assert outcome.payload == "{}"
        assert outcome.succeeded

    def test_exit_one_without_marker_fails(self):
        outcome = classify(Tool.MKVMERGE, _result(1, errors="  Error: no such file\n"))
        assert outcome.classification is Classification.FAILURE
        assert outcome.message == "Operation failed with exit code 1.\nDetails:\nError: no such file"

    def test_marker_on_stdout_does_not_count(self):
        outcome = classify(Tool.MKVMERGE, _result(1, output="Warning: on stdout"))
        assert outcome.classification is Classification.FAILURE

    def test_other_exit_codes_fail_even_with_marker(self):
        outcome = classify(Tool.MKVPROPEDIT, _result(2, errors="Warning: something"))
        assert outcome.classification is Classification.FAILURE
        assert not outcome.succeeded
