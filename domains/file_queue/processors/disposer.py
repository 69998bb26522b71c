"""
File disposition after a command outcome.

Moves a file into a queue directory (keeping its name) or deletes it.
Failures are logged and reported to the caller, never raised.
"""

from pathlib import Path

from loguru import logger

from app.utils.helpers import destination_for
from domains.file_queue.models import Disposition, FileEntry


class Disposer:
    """Applies a Disposition to files leaving the watched directory."""

    def dispose(self, entry: FileEntry, disposition: Disposition) -> bool:
        """
        Move or delete the file behind ``entry``.

        Args:
            entry: File in the watched directory
            disposition: Destination directory, or delete

        Returns:
            True if the file left the watched directory, False on error
        """
        if disposition.deletes:
            return self.delete(entry)
        return self.move(entry, disposition.target)

    def move(self, entry: FileEntry, directory: Path) -> bool:
        """Move the file into ``directory``, replacing a same-named file."""
        source = entry.path
        dest = destination_for(entry.name, directory)
        logger.debug(f"Moving {source} to {dest}")

        try:
            source.replace(dest)
        except OSError as e:
            logger.error(f"Error {e} while renaming {source} to {dest}")
            return False

        return True

    def delete(self, entry: FileEntry) -> bool:
        """Remove the file."""
        logger.debug(f"Deleting {entry.path}")

        try:
            entry.path.unlink()
        except OSError as e:
            logger.error(f"Error {e} while deleting {entry.path}")
            return False

        return True
