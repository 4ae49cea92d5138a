"""
Per-tool policies deciding what an exit status means.

Most tools follow the usual convention: 0 succeeds, anything else fails. The
MKVToolNix tools also use exit code 1 for "completed, but see warnings"; that
case only counts as a success when stderr actually carries a warning marker.
"""
from typing import assert_never

from loguru import logger

from ..config.common import (
    FAILURE_OUTPUT_TAIL_LINES,
    MSG_SUCCESS,
    MSG_WARNING_SUCCESS,
)
from ..domain.results import Classification, ExecutionResult, Outcome
from ..domain.tools import ExitPolicy, Tool
from ..utils.format_utils import tail_lines

SUCCESS_EXIT_CODE = 0
WARNING_EXIT_CODE = 1
WARNING_MARKER = "Warning:"


def classify(tool: Tool, result: ExecutionResult) -> Outcome:
    """
    Classifies `result` under the exit policy of `tool`.

    On success (with or without warnings) the primary-channel text becomes the
    outcome's payload. A failure carries only a diagnostic message.
    """
    match tool.exit_policy:
        case ExitPolicy.DEFAULT:
            outcome = _classify_default(tool, result)
        case ExitPolicy.WARNING_TOLERANT:
            outcome = _classify_warning_tolerant(result)
        case _:
            assert_never(tool.exit_policy)

    logger.debug(
        f"{tool.executable_name} exited with {result.exit_code}: {outcome.classification.name}"
    )
    return outcome


def _classify_default(tool: Tool, result: ExecutionResult) -> Outcome:
    if result.exit_code == SUCCESS_EXIT_CODE:
        return Outcome(Classification.SUCCESS, MSG_SUCCESS, result.output)

    message = f"{tool.executable_name} failed with exit code {result.exit_code}."
    details = tail_lines(result.output, FAILURE_OUTPUT_TAIL_LINES)
    if details:
        message += f"\nDetails:\n{details}"
    return Outcome(Classification.FAILURE, message)


def _classify_warning_tolerant(result: ExecutionResult) -> Outcome:
    if result.exit_code == SUCCESS_EXIT_CODE:
        return Outcome(Classification.SUCCESS, MSG_SUCCESS, result.output)
    if result.exit_code == WARNING_EXIT_CODE and WARNING_MARKER in result.errors:
        return Outcome(Classification.WARNING_SUCCESS, MSG_WARNING_SUCCESS, result.output)

    message = f"Operation failed with exit code {result.exit_code}."
    if result.errors.strip():
        message += f"\nDetails:\n{result.errors.strip()}"
    return Outcome(Classification.FAILURE, message)
