"""
Defines custom exception types for the Video Tools application.

Every failure the orchestration layer can encounter maps to one of these
classes, so that an orchestrator can turn any of them into exactly one
terminal error notification without inspecting message texts. Nothing in this
hierarchy is retried automatically.

All custom exceptions inherit from the base `VideoToolsException`.
"""
from typing import Optional

from .results import ExecutionResult


class VideoToolsException(Exception):
    """Base class for all custom exceptions in the Video Tools application."""

    pass


class ValidationFailure(VideoToolsException):
    """
    Raised when a request is rejected before any process is launched.

    Examples are an empty clip list for a merge or a malformed segment length
    for a split. No external process has been started when this is raised.
    """

    pass


class LaunchFailure(VideoToolsException):
    """
    Raised when the operating system could not start an external tool.

    Typical causes are a missing executable, a file without the executable bit
    or a permission error. No `ExecutionResult` exists for such an invocation.
    """

    pass


class StreamFailure(VideoToolsException):
    """
    Raised when reading one of a process's output channels fails.

    This is distinct from a tool-reported failure: the process may well have
    succeeded, but its output could not be processed.
    """

    pass


class ToolFailure(VideoToolsException):
    """
    Raised when a process ran to completion but its exit status was classified
    as a failure.

    The `result` attribute carries the full execution result (exit code and
    captured output) for callers that want to inspect it.
    """

    def __init__(self, message: str, result: Optional[ExecutionResult] = None):
        super().__init__(message)
        self.result = result

    @property
    def exit_code(self) -> Optional[int]:
        return self.result.exit_code if self.result else None


class ParseFailure(VideoToolsException):
    """
    Raised when JSON metadata reported by a probe or property read is malformed
    or lacks a required field.
    """

    pass


class RunnerClosedError(VideoToolsException):
    """Raised when a command is submitted to a process runner that was shut down."""

    pass
