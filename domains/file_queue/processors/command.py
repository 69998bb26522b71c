"""
External command invocation for queue entries.

Builds the argument vector (command template + file path), runs it to
completion and classifies the result as an Outcome. Standard output and
error of the child are inherited.
"""

import subprocess
from typing import List, Optional, Sequence

from loguru import logger

from domains.file_queue.models import NonZeroExit, Outcome, SpawnFailure, Success


class CommandRunner:
    """Runs the configured command against one file at a time."""

    def __init__(self, command: Sequence[str], timeout: Optional[float] = None):
        """
        Initialize command runner.

        Args:
            command: Executable followed by its fixed leading arguments
            timeout: Seconds to wait before killing the child; None waits forever
        """
        if not command:
            raise ValueError("command must contain at least the executable")

        self.command = list(command)
        self.timeout = timeout

    def build_argv(self, path: str) -> List[str]:
        """Command tokens with the file path appended as the last argument."""
        return [*self.command, path]

    def run(self, path: str) -> Outcome:
        """
        Invoke the command for ``path`` and wait for it to exit.

        Args:
            path: File path passed as the last argument

        Returns:
            Success, NonZeroExit or SpawnFailure
        """
        argv = self.build_argv(path)
        logger.info(f"Executing: {argv}")

        try:
            completed = subprocess.run(argv, check=False, timeout=self.timeout)

        except subprocess.TimeoutExpired as e:
            # subprocess.run has already killed and reaped the child
            logger.error(f"Command timed out after {self.timeout}s: {argv}")
            return SpawnFailure(error=e)

        except OSError as e:
            return SpawnFailure(error=e)

        if completed.returncode == 0:
            logger.debug("Process executed successfully")
            return Success()

        return NonZeroExit(code=completed.returncode)
