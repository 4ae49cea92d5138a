"""Pytest configuration and shared fixtures for videotools tests."""
from pathlib import Path
from typing import List, Tuple

import pytest

from videotools.config.common import MSG_SUCCESS
from videotools.domain.results import Classification, Outcome
from videotools.domain.tools import Tool
from videotools.utils.command_builder import CommandBuilder
from videotools.utils.futures import completed, failed
from videotools.utils.tool_resolver import ToolResolver

LIBRARY_DIR = Path("/opt/videotools/library")


class RecordingListener:
    """Collects every notification as a (kind, text) pair, in arrival order."""

    def __init__(self):
        self.events: List[Tuple[str, str]] = []

    def on_progress(self, line: str) -> None:
        self.events.append(("progress", line))

    def on_complete(self, message: str) -> None:
        self.events.append(("complete", message))

    def on_error(self, message: str) -> None:
        self.events.append(("error", message))

    def clear_log(self) -> None:
        self.events.append(("clear", ""))

    @property
    def progress(self) -> List[str]:
        return [text for kind, text in self.events if kind == "progress"]

    @property
    def terminal(self) -> List[Tuple[str, str]]:
        return [event for event in self.events if event[0] in ("complete", "error")]


class FakeRunner:
    """
    Stands in for `ProcessRunner`: records every command and answers with
    pre-completed futures queued per tool. Unqueued calls succeed with empty output.
    """

    def __init__(self):
        self.calls: List[Tuple[Tuple[str, ...], Tool]] = []
        self._responses = {}

    def respond(self, tool: Tool, *responses) -> None:
        self._responses.setdefault(tool, []).extend(responses)

    def run(self, command, tool, listener=None):
        self.calls.append((tuple(command), tool))
        queue = self._responses.get(tool) or []
        response = queue.pop(0) if queue else success()
        if isinstance(response, BaseException):
            return failed(response)
        return completed(response)

    def commands_for(self, tool: Tool) -> List[Tuple[str, ...]]:
        return [command for command, called_tool in self.calls if called_tool is tool]


def success(payload: str = "") -> Outcome:
    return Outcome(Classification.SUCCESS, MSG_SUCCESS, payload)


@pytest.fixture
def resolver() -> ToolResolver:
    return ToolResolver(LIBRARY_DIR, is_windows=False)


@pytest.fixture
def builder(resolver) -> CommandBuilder:
    return CommandBuilder(resolver)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
