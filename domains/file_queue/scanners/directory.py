"""
Directory scanner for the File Queue domain.

Lists the watched directory (non-recursive) and runs every eligible regular
file through match -> command -> disposition. Nothing is remembered between
scans: a file that has been disposed of is simply absent from the next
listing, so scanning repeatedly is safe.
"""

import os
import threading
from typing import Optional

from loguru import logger

from app.utils.config import QueueConfig
from app.utils.helpers import path_as_text
from domains.file_queue.models import FileEntry, NonZeroExit, ScanReport
from domains.file_queue.processors import CommandRunner, Disposer, PatternMatcher


class DirectoryScanner:
    """Scanner that processes the current contents of the queue directory."""

    def __init__(
        self,
        config: QueueConfig,
        runner: Optional[CommandRunner] = None,
        disposer: Optional[Disposer] = None,
        stop: Optional[threading.Event] = None,
    ):
        """
        Initialize directory scanner.

        Args:
            config: Validated queue configuration
            runner: Command runner (built from config if omitted)
            disposer: File disposer (default Disposer if omitted)
            stop: Set when the daemon is shutting down; checked between files
        """
        self.config = config
        self.matcher = PatternMatcher(config.pattern)
        self.runner = runner or CommandRunner(config.command, timeout=config.command_timeout)
        self.disposer = disposer or Disposer()
        self.stop = stop or threading.Event()

    def scan(self) -> ScanReport:
        """
        Process every eligible file currently in the directory.

        Files are handled in ``os.scandir`` order. Listing errors end the
        scan early; the next trigger starts over from a fresh listing.
        A set stop event ends the scan before the next file is started.

        Returns:
            ScanReport with per-scan counters
        """
        report = ScanReport()

        try:
            with os.scandir(self.config.directory) as entries:
                for dir_entry in entries:
                    if self.stop.is_set():
                        logger.info("Shutdown requested, leaving remaining files in place")
                        report.interrupted = True
                        return report

                    try:
                        entry = FileEntry.from_dir_entry(dir_entry)
                    except OSError as e:
                        logger.error(f"Error on directory entry {dir_entry.path}: {e}")
                        report.aborted = True
                        return report

                    if entry.is_file:
                        self.handle_file(entry, report)

        except OSError as e:
            logger.error(f"Error while enumerating directory {self.config.directory}: {e}")
            report.aborted = True

        return report

    def handle_file(self, entry: FileEntry, report: ScanReport) -> None:
        """
        Run one regular file through the pipeline.

        Args:
            entry: File picked up by the current listing
            report: Counters updated in place
        """
        entry_path = path_as_text(entry.path)
        if entry_path is None:
            logger.error(f"Ignoring invalid path: {entry.path!r}")
            report.skipped += 1
            return

        if not self.matcher.matches(entry_path):
            logger.debug(f"Ignoring {entry_path} because it doesn't match pattern")
            report.skipped += 1
            return

        outcome = self.runner.run(entry_path)

        if not outcome.ok and self.stop.is_set():
            # Failures during shutdown are not attributed to the file
            logger.warning(f"Leaving {entry_path} in place, command interrupted by shutdown")
            report.interrupted = True
            return

        if outcome.ok:
            report.succeeded += 1
            destination = self.config.success_destination
        else:
            if isinstance(outcome, NonZeroExit):
                reason = f"Exited with status {outcome.code}"
            else:
                reason = f"Could not start command: {outcome.error}"
            logger.error(f"While executing command for entry {entry_path}: {reason}")
            report.failed += 1
            destination = self.config.failure_destination

        logger.debug(f"Routing {entry_path}: {destination.describe()}")
        if not self.disposer.dispose(entry, destination):
            report.disposal_errors += 1
