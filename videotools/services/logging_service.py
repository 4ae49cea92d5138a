"""
This module provides the progress listener contract and its logging-backed
implementations.

A listener receives zero or more progress lines followed by exactly one
terminal call (`on_complete` or `on_error`). The orchestration layer calls it
from worker threads; an implementation that drives a UI has to marshal the
calls onto its own thread.

The `ErrorLog` class keeps a plain-text, append-only record of failures, which
is handy when the tools run unattended.
"""
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol

from loguru import logger

from ..config.common import ERROR_LOG_FILE_NAME


class ProgressListener(Protocol):
    def on_progress(self, line: str) -> None:
        """Receives one line of progress text. May be called from any thread."""

    def on_complete(self, message: str) -> None:
        """Terminal: the operation succeeded. Nothing is reported afterwards."""

    def on_error(self, message: str) -> None:
        """Terminal: the operation failed. Nothing is reported afterwards."""

    def clear_log(self) -> None:
        """Resets the listener's own display. Never called by the core."""


class NullListener:
    """Discards every notification."""

    def on_progress(self, line: str) -> None:
        pass

    def on_complete(self, message: str) -> None:
        pass

    def on_error(self, message: str) -> None:
        pass

    def clear_log(self) -> None:
        pass


class ErrorLog:
    """
    Handles the writing of error logs to a plain text file.

    Each new error is appended to the log file, followed by a separator line,
    making it a chronological record of the failures of every run.
    """

    # A decorative separator line used in text-based logs for better readability.
    linesep_marker: str = "=" * 50

    def __init__(self, error_log_dir: Path, filename: str = ERROR_LOG_FILE_NAME):
        self.log_dir = Path(error_log_dir).resolve()
        self.log_file_path = self.log_dir / filename
        self._lock = threading.Lock()

    def write(self, *error_messages: str):
        """
        Appends one or more error messages to the log file.

        A failure to write is logged and otherwise ignored: the failure being
        recorded has already been reported and must not be replaced by this one.

        Args:
            *error_messages: Pieces of the error message, written one per line.
        """
        if not error_messages:
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        content_to_write = (
            f"[{timestamp}]\n" + "\n".join(error_messages) + "\n" + self.linesep_marker + "\n"
        )
        try:
            with self._lock:
                self.log_dir.mkdir(parents=True, exist_ok=True)
                with self.log_file_path.open("a", encoding="utf-8") as f:
                    f.write(content_to_write)
        except OSError as e:
            logger.error(f"Failed to write to error log {self.log_file_path}: {e}")


class LoggingProgressListener:
    """
    Listener used by the command line: progress goes to the console logger,
    failures optionally also to an `ErrorLog`.
    """

    def __init__(self, operation: str, error_log: Optional[ErrorLog] = None):
        self.operation = operation
        self.error_log = error_log

    def on_progress(self, line: str) -> None:
        if line.strip():
            logger.info(line)

    def on_complete(self, message: str) -> None:
        logger.success(message)

    def on_error(self, message: str) -> None:
        logger.error(message)
        if self.error_log:
            self.error_log.write(f"Operation: {self.operation}", message)

    def clear_log(self) -> None:
        pass
