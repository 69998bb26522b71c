"""
Watch driver for the File Queue domain.

Runs one scan at startup, then one scan per create/modify notification,
strictly one at a time. Returns when the notifier's stream closes.
"""

from enum import Enum
from pathlib import Path

from loguru import logger

from domains.file_queue.models import ScanReport, WatchError
from domains.file_queue.scanners import DirectoryScanner
from domains.file_queue.watchers.notifier import Notifier


class DriverState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"


class WatchDriver:
    """Feeds notifier events into the directory scanner."""

    def __init__(self, scanner: DirectoryScanner, notifier: Notifier, directory: Path):
        """
        Initialize watch driver.

        Args:
            scanner: Scanner run on every trigger
            notifier: Source of change notifications
            directory: Directory to subscribe to
        """
        self.scanner = scanner
        self.notifier = notifier
        self.directory = directory
        self.state = DriverState.IDLE
        self.scans = 0

    def scan(self) -> ScanReport:
        """Run one scan, tracking the driver state around it."""
        self.state = DriverState.SCANNING
        try:
            report = self.scanner.scan()
        finally:
            self.state = DriverState.IDLE

        self.scans += 1
        logger.debug(
            f"Scan {self.scans} finished: {report.succeeded} succeeded, "
            f"{report.failed} failed, {report.skipped} skipped"
        )
        return report

    def run(self) -> int:
        """
        Watch the directory until the event stream closes.

        Raises OSError if the watch cannot be established.

        Returns:
            Process exit status (0 on clean shutdown)
        """
        # Subscribe first so files dropped during the initial scan still trigger
        events = self.notifier.subscribe(self.directory)

        interrupted = self.scan().interrupted

        for item in events:
            if interrupted:
                break

            if isinstance(item, WatchError):
                logger.error(f"Error while watching file: {item.error}")
                continue

            logger.info(f"Event: {item.kind.value} {item.path}")
            if item.kind.triggers_scan:
                interrupted = self.scan().interrupted

        if interrupted:
            self.notifier.close()
            logger.success("Scan interrupted by shutdown, remaining files left in place")
        else:
            logger.success("Event stream closed, shutting down")
        return 0
