"""Tests for the console listener and the plain-text error log."""
from loguru import logger

from videotools.services.logging_service import ErrorLog, LoggingProgressListener, NullListener


class TestErrorLog:
    def test_appends_blocks(self, tmp_path):
        error_log = ErrorLog(tmp_path / "logs")
        error_log.write("Operation: merge", "first failure")
        error_log.write("second failure")

        text = (tmp_path / "logs" / "error.txt").read_text(encoding="utf-8")
        assert text.count("=" * 50) == 2
        assert text.index("first failure") < text.index("second failure")
        assert text.startswith("[")

    def test_nothing_to_write(self, tmp_path):
        ErrorLog(tmp_path).write()
        assert not (tmp_path / "error.txt").exists()

    def test_unwritable_location_is_logged_not_raised(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        ErrorLog(blocker / "sub").write("lost")


class TestLoggingProgressListener:
    def test_routes_notifications_to_logger(self, tmp_path):
        messages = []
        sink_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
        try:
            listener = LoggingProgressListener("convert", ErrorLog(tmp_path))
            listener.on_progress("frame=  10 fps=0.0")
            listener.on_progress("   ")
            listener.on_complete("Operation completed successfully.")
            listener.on_error("ffmpeg failed with exit code 1.")
        finally:
            logger.remove(sink_id)

        levels = [(record["level"].name, record["message"]) for record in messages]
        assert ("INFO", "frame=  10 fps=0.0") in levels
        assert ("SUCCESS", "Operation completed successfully.") in levels
        assert ("ERROR", "ffmpeg failed with exit code 1.") in levels
        assert all(message.strip() for _, message in levels)
        assert "Operation: convert" in (tmp_path / "error.txt").read_text(encoding="utf-8")

    def test_null_listener_accepts_everything(self):
        listener = NullListener()
        listener.on_progress("x")
        listener.on_complete("y")
        listener.on_error("z")
        listener.clear_log()
