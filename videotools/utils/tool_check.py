"""
This module provides the ToolCheck class to verify that the external tools
required by the application can be found and executed.
"""
import subprocess

from loguru import logger

from ..domain.tools import Tool
from .tool_resolver import ToolResolver


class ToolCheck:
    """
    A utility class that asks each external tool for its version.

    The checks run synchronously, outside the process runner's worker pool,
    because they are meant to be run once, interactively, before any real work.
    """

    @staticmethod
    def verify(resolver: ToolResolver, tool: Tool) -> bool:
        """
        Verifies that `tool` is installed, accessible, and can be executed.

        This method runs `<tool> -version` (or `--version` for the MKVToolNix
        pair), logs the first line of the output on success, and logs a
        detailed error message if the command fails or cannot be found.

        Returns:
            True if the tool answered its version flag with exit code 0.
        """
        command = [resolver.resolve(tool), tool.version_flag]

        try:
            result = subprocess.run(
                command,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
            version_output_lines = result.stdout.splitlines() or [""]
            logger.info(f"{tool.executable_name} found at '{command[0]}': {version_output_lines[0]}")
            return True
        except subprocess.CalledProcessError as e:
            logger.error(
                f"{tool.executable_name} version command failed (return code {e.returncode}):\n{e.stderr}"
            )
        except FileNotFoundError:
            logger.error(
                f"{tool.executable_name} not found at '{command[0]}'. Please ensure it is installed and accessible.\n"
                "You can either add it to your system's PATH, place it in the library directory, "
                "or set its location under 'paths.tools' in the 'config.user.yaml' file."
            )
        except OSError as e:
            logger.error(f"Could not execute {tool.executable_name} at '{command[0]}': {e}")
        return False

    @staticmethod
    def run_all(resolver: ToolResolver) -> bool:
        """Checks every tool in turn. Returns True only if all of them answered."""
        results = [ToolCheck.verify(resolver, tool) for tool in Tool]
        return all(results)
