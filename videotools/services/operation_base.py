"""
Shared plumbing for the operation orchestrators.

An orchestrator composes the command builder, the process runner and the
outcome classifier into one user-facing operation. Whatever happens inside,
the caller's listener receives zero or more progress lines and then exactly one
terminal call, and the future returned to the caller completes only after that
terminal call has been made.
"""
from concurrent.futures import Future
from typing import Any, Callable, Optional

from loguru import logger

from ..config.common import MSG_UNEXPECTED_ERROR
from ..domain.exceptions import ToolFailure, VideoToolsException
from ..domain.results import Outcome
from ..domain.tools import Tool
from ..utils.command_builder import Command, CommandBuilder
from ..utils.futures import exception_of, failed
from .logging_service import NullListener, ProgressListener
from .process_runner import ProcessRunner


def describe_error(error: BaseException) -> str:
    """Turns any failure into the text of a terminal error notification."""
    if isinstance(error, VideoToolsException):
        return str(error)
    return MSG_UNEXPECTED_ERROR.format(error=error)


def rephrased(error: BaseException, message: str) -> VideoToolsException:
    """
    Returns a copy of `error` carrying `message`, keeping its failure category.

    Unexpected exceptions become a plain `VideoToolsException`. The original
    exception is kept as `__cause__`.
    """
    if isinstance(error, ToolFailure):
        new_error: VideoToolsException = ToolFailure(message, error.result)
    elif isinstance(error, VideoToolsException):
        new_error = type(error)(message)
    else:
        new_error = VideoToolsException(message)
    new_error.__cause__ = error
    return new_error


class Operation:
    """
    Base class of the operation orchestrators.

    Subclasses build their commands, hand them to `self.runner` and pass the
    resulting future to `finish`, which performs the single terminal listener
    call.

    Attributes:
        name (str): Short operation name used in log messages.
    """

    name: str = "operation"

    def __init__(self, runner: ProcessRunner, builder: CommandBuilder):
        self.runner = runner
        self.builder = builder

    def run_tool(
        self, command: Command, tool: Tool, listener: ProgressListener
    ) -> "Future[Outcome]":
        return self.runner.run(command, tool, listener)

    def finish(
        self,
        work: Future,
        listener: Optional[ProgressListener],
        success_message: Optional[Callable[[Any], str]] = None,
        before_terminal: Optional[Callable[[], None]] = None,
    ) -> Future:
        """
        Reports the completion of `work` to `listener` exactly once.

        Args:
            work: The future of the whole operation.
            listener: Receives the terminal call.
            success_message: Maps the result of `work` to the completion text.
                Defaults to the message of the `Outcome` the future holds.
            before_terminal: Cleanup run after `work` completes and before the
                terminal call, whatever the outcome.

        Returns:
            A future completing with the result (or exception) of `work`, after
            the listener has been notified.
        """
        listener = listener or NullListener()
        reported: Future = Future()

        def _on_done(done: Future) -> None:
            if before_terminal is not None:
                try:
                    before_terminal()
                except Exception as e:
                    logger.warning(f"{self.name}: cleanup before reporting failed: {e}")

            error = exception_of(done)
            result = None
            message = ""
            if error is None:
                result = done.result()
                try:
                    message = success_message(result) if success_message else result.message
                except Exception as e:
                    error = e

            # An exception escaping this callback would be swallowed by the
            # future and leave `reported` pending forever.
            try:
                if error is not None:
                    text = describe_error(error)
                    logger.debug(f"{self.name} failed: {text}")
                    listener.on_error(text)
                else:
                    logger.debug(f"{self.name} finished: {message}")
                    listener.on_complete(message)
            except Exception as e:
                logger.opt(exception=e).error(f"{self.name}: listener raised during the terminal call")
            finally:
                if error is not None:
                    reported.set_exception(error)
                else:
                    reported.set_result(result)

        work.add_done_callback(_on_done)
        return reported

    def reject(self, error: BaseException, listener: Optional[ProgressListener]) -> Future:
        """Reports a failure raised before any work started. The call is synchronous."""
        return self.finish(failed(error), listener)
