"""
Utilities Package for the Video Tools Application.

This package contains helper modules without process or thread management of
their own.

Modules:
    - tool_resolver.py: Maps a logical tool to the executable placed at the head
      of an argument vector.
    - command_builder.py: Pure functions and the `CommandBuilder` class mapping
      operation requests to argument vectors.
    - file_utils.py: Output path derivation and the concat demuxer's list file.
    - format_utils.py: Display helpers for commands and captured output.
    - futures.py: Non-blocking composition of `concurrent.futures.Future`.
    - tool_check.py: Verifies that every external tool can be executed.
"""
