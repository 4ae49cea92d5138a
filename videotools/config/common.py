"""
Common configuration settings used throughout the application.

This module contains the globally shared constants of the Video Tools application
(logging format, message texts, worker pool defaults) and the loader for the
user-specific `config.user.yaml` file. Unlike a module-level import side effect,
the user configuration is loaded explicitly, once, by the launcher and handed to
the components that need it.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger

# --- User-Defined Configuration ---
# The name of the optional YAML file, looked up next to the launcher unless an
# explicit path is given on the command line.
USER_CONFIG_FILE_NAME = "config.user.yaml"

# Name of the directory (beside the launcher) that holds bundled executables.
LIBRARY_DIR_NAME = "library"


# --- Logging Configuration ---
# The format string for the Loguru logger. It defines the structure and appearance
# of log messages, including timestamp, level, module name, and the message itself.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

DEFAULT_LOG_LEVEL = "INFO"

# The filename for the append-only failure log written when `error_log_dir` is set.
ERROR_LOG_FILE_NAME = "error.txt"


# --- Worker Pool ---
# Thread name prefix for the shared worker pool owned by the process runner.
WORKER_THREAD_PREFIX = "videotools"


# --- Outcome Messages ---
MSG_SUCCESS = "Operation completed successfully."
MSG_WARNING_SUCCESS = "Operation completed with warnings."
MSG_UNEXPECTED_ERROR = "An unexpected error occurred: {error}"

MSG_NO_CLIPS = "No video clips provided to merge."
MSG_MERGE_LIST_FAILED = "Failed to create temporary file for merging: {error}"
MSG_CLEANUP_FAILED = "Cleanup failed: Could not delete temporary file {path}. Error: {error}"

MSG_PROBE_FAILED = "Error during ffprobe execution: {error}"
MSG_PROBE_EMPTY = "Failed to get stream information: ffprobe returned empty output."
MSG_PROBE_MALFORMED = "Failed to parse ffprobe JSON output: {error}"

MSG_NO_AUDIO_TRACKS = "No audio tracks found in the video."
MSG_AUDIO_DONE = "Audio extraction complete for all tracks."
MSG_AUDIO_FAILED = "An error occurred during audio extraction: {error}"

MSG_NO_SUBTITLE_TRACKS = "No subtitle tracks found in the video."
MSG_SUBTITLES_DONE = "Subtitle extraction complete for all tracks."
MSG_SUBTITLES_FAILED = "An error occurred during subtitle extraction: {error}"

# Number of trailing output lines quoted in a failure message for tools whose
# output channel is merged (ffmpeg prints its whole banner there).
FAILURE_OUTPUT_TAIL_LINES = 20


def default_worker_count() -> int:
    """Returns the default worker pool size: one worker per available CPU core."""
    return os.cpu_count() or 1


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable application configuration, computed once at process start.

    Attributes:
        base_path: Directory of the running launcher. Bundled tools are looked
                   up relative to it unless `library_dir` says otherwise.
        library_dir: Directory holding bundled tool executables.
        tool_paths: Explicit per-tool executable overrides keyed by tool name
                    (e.g. ``{"mkvmerge": "/usr/local/bin/mkvmerge"}``).
        workers: Size of the worker pool used for process supervision.
        log_level: Console log level.
        error_log_dir: Directory for the plain-text failure log, or None to disable it.
    """

    base_path: Path
    library_dir: Path
    tool_paths: Dict[str, str] = field(default_factory=dict)
    workers: int = field(default_factory=default_worker_count)
    log_level: str = DEFAULT_LOG_LEVEL
    error_log_dir: Optional[Path] = None


def _resolve_against(base_path: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else (base_path / path).resolve()


def load_config(base_path: Path, config_path: Optional[Path] = None) -> AppConfig:
    """
    Builds the application configuration from defaults and the optional user YAML file.

    Relative paths inside the YAML file are resolved against `base_path`. A missing
    file silently yields the defaults; an unreadable or malformed file is reported
    as a warning and also yields the defaults, so a broken config never prevents
    the tools from starting.

    Args:
        base_path: The launcher's directory, determined once by the caller.
        config_path: Explicit config file. Defaults to `<base_path>/config.user.yaml`.

    Returns:
        The resolved `AppConfig`.
    """
    base_path = base_path.resolve()
    defaults = AppConfig(base_path=base_path, library_dir=base_path / LIBRARY_DIR_NAME)
    config_path = config_path or base_path / USER_CONFIG_FILE_NAME

    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using built-in defaults.")
        return defaults

    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            raise ValueError("top-level YAML value must be a mapping")

        paths_config = user_config.get("paths") or {}
        library_dir = defaults.library_dir
        if paths_config.get("library_dir"):
            library_dir = _resolve_against(base_path, str(paths_config["library_dir"]))
        tool_paths = {
            str(name).lower(): str(path)
            for name, path in (paths_config.get("tools") or {}).items()
            if path
        }

        workers = int(user_config.get("workers") or defaults.workers)
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        error_log_dir = None
        if user_config.get("error_log_dir"):
            error_log_dir = _resolve_against(base_path, str(user_config["error_log_dir"]))

        config = AppConfig(
            base_path=base_path,
            library_dir=library_dir,
            tool_paths=tool_paths,
            workers=workers,
            log_level=str(user_config.get("log_level") or DEFAULT_LOG_LEVEL).upper(),
            error_log_dir=error_log_dir,
        )
        logger.debug(f"Loaded user config from '{config_path}': {config}")
        return config
    except (OSError, yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return defaults
