"""
Asynchronous supervision of external tool processes.

The runner launches one process per argument vector and turns it into exactly
one future: an `Outcome` on success (or success with warnings), or a
`VideoToolsException` on failure. Every output channel of the process is
drained by its own worker task while another task waits for the exit, so a
chatty tool can never fill a pipe buffer and stall. The future completes only
after the exit and every drain have finished.
"""
import subprocess
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, IO, assert_never

from loguru import logger

from ..config.common import WORKER_THREAD_PREFIX, default_worker_count
from ..domain.exceptions import (
    LaunchFailure,
    RunnerClosedError,
    StreamFailure,
    ToolFailure,
    VideoToolsException,
)
from ..domain.results import Classification, ExecutionResult, Outcome
from ..domain.tools import ChannelMode, Tool
from ..utils.format_utils import display_command
from ..utils.futures import failed, when_all
from .logging_service import NullListener, ProgressListener
from .outcome_classifier import classify

PopenFactory = Callable[..., subprocess.Popen]

MIN_WORKERS = 2


class ProcessRunner:
    """
    Owns the worker pool that launches, drains and awaits external processes.

    The pool is created once and shut down once. Per invocation the drain tasks
    are submitted before the exit-wait task; the executor's queue is FIFO, so an
    exit-wait task only ever starts after its own drains have been picked up and
    a saturated pool cannot leave a process blocked on an undrained pipe.

    Usage:
        with ProcessRunner(workers=4) as runner:
            outcome = runner.run(command, Tool.FFMPEG, listener).result()
    """

    def __init__(self, workers: Optional[int] = None, popen: PopenFactory = subprocess.Popen):
        # stdout and stderr of one process must be drained at the same time
        self.workers = max(workers or default_worker_count(), MIN_WORKERS)
        self._popen = popen
        self._executor = ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix=WORKER_THREAD_PREFIX
        )
        self._lock = threading.Lock()
        self._closed = False

    def __enter__(self) -> "ProcessRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    @property
    def closed(self) -> bool:
        return self._closed

    def shutdown(self) -> None:
        """
        Stops accepting commands. Tasks already submitted run to completion.
        Calling it again is a no-op.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
        logger.debug("Shutting down process runner worker pool.")
        self._executor.shutdown(wait=False)

    def run(
        self,
        command: Sequence[str],
        tool: Tool,
        listener: Optional[ProgressListener] = None,
    ) -> "Future[Outcome]":
        """
        Launches `command` and supervises it on the worker pool.

        Progress lines from every channel are forwarded to `listener.on_progress`
        as they are read. The runner never makes terminal listener calls; those
        belong to the orchestrator that owns the operation.

        Args:
            command: The argument vector; its first element is the executable.
            tool: Which tool the command runs, selecting channel and exit policies.
            listener: Receives progress lines. Optional.

        Returns:
            A future holding the classified `Outcome` when the tool succeeded
            (possibly with warnings). It fails with `LaunchFailure`,
            `StreamFailure`, `ToolFailure` or `RunnerClosedError` otherwise.
            This method itself does not raise for any of these.
        """
        listener = listener or NullListener()
        command = tuple(str(part) for part in command)
        display = display_command(command)

        with self._lock:
            if self._closed:
                return failed(RunnerClosedError("Process runner has been shut down."))

            listener.on_progress(f"Executing command: {display}")
            listener.on_progress("")
            logger.debug(f"Launching {tool.executable_name}: {display}")

            mode = tool.channel_mode
            try:
                process = self._launch(command, mode)
            except OSError as e:
                logger.error(f"Could not start '{command[0]}': {e}")
                return failed(
                    LaunchFailure(
                        f"Failed to start '{command[0]}'. Ensure {tool.executable_name} is "
                        f"installed and available on your PATH. Details: {e}"
                    )
                )

            output_lines: List[str] = []
            error_lines: List[str] = []
            drains = [self._executor.submit(self._drain, process.stdout, output_lines, listener)]
            match mode:
                case ChannelMode.MERGED:
                    pass
                case ChannelMode.SEPARATE:
                    drains.append(
                        self._executor.submit(self._drain, process.stderr, error_lines, listener)
                    )
                case _:
                    assert_never(mode)
            exit_wait = self._executor.submit(process.wait)

        outcome: Future = Future()

        def _compose(joined: Future) -> None:
            error = joined.exception()
            if error is not None:
                if not isinstance(error, VideoToolsException):
                    error = StreamFailure(f"Failed while processing command output. Details: {error}")
                logger.error(f"{tool.executable_name}: {error}")
                outcome.set_exception(error)
                return

            result = ExecutionResult(
                command=command,
                exit_code=exit_wait.result(),
                output="".join(output_lines),
                errors="".join(error_lines),
            )
            try:
                classified = classify(tool, result)
            except Exception as e:
                outcome.set_exception(e)
                return
            if classified.classification is Classification.FAILURE:
                outcome.set_exception(ToolFailure(classified.message, result))
            else:
                outcome.set_result(classified)

        when_all([*drains, exit_wait]).add_done_callback(_compose)
        return outcome

    def _launch(self, command: Sequence[str], mode: ChannelMode) -> subprocess.Popen:
        stderr = subprocess.STDOUT if mode is ChannelMode.MERGED else subprocess.PIPE
        return self._popen(
            list(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=stderr,
            text=True,
            encoding="utf-8",
            errors="replace",
            shell=False,
        )

    @staticmethod
    def _drain(stream: IO[str], buffer: List[str], listener: ProgressListener) -> None:
        """Reads `stream` line by line until EOF, buffering and forwarding each line."""
        try:
            for raw_line in stream:
                line = raw_line.rstrip("\r\n")
                buffer.append(line + "\n")
                listener.on_progress(line)
        except (OSError, ValueError) as e:
            raise StreamFailure(f"Failed while processing command output. Details: {e}") from e
        finally:
            stream.close()
