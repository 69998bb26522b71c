"""
Filesystem change notifier for the File Queue domain.

Wraps a watchdog observer behind a small subscription interface: the
driver asks for the event stream of one directory and iterates it until
the stream closes. The observer thread only enqueues translated events;
everything else happens on the consuming thread.
"""

import os
import queue
import threading
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.polling import PollingObserver

from domains.file_queue.models import EventKind, WatchError, WatchEvent

Notification = Union[WatchEvent, WatchError]

_EVENT_KINDS = {
    "created": EventKind.CREATED,
    "modified": EventKind.MODIFIED,
    "moved": EventKind.MOVED,
    "deleted": EventKind.DELETED,
}


class Notifier(Protocol):
    """Source of change notifications for a single directory."""

    def subscribe(self, directory: Path) -> Iterator[Notification]:
        """
        Start watching ``directory`` (non-recursive).

        Raises OSError if the watch cannot be established. The returned
        iterator ends when the source is closed and cannot be restarted.
        """
        ...

    def close(self) -> None:
        """End the event stream."""
        ...


def translate_event(event: FileSystemEvent) -> WatchEvent:
    """Map a watchdog event onto a WatchEvent."""
    return WatchEvent(
        kind=_EVENT_KINDS.get(event.event_type, EventKind.OTHER),
        path=os.fsdecode(event.src_path),
        is_directory=event.is_directory,
    )


class QueueEventHandler(FileSystemEventHandler):
    """Watchdog handler that forwards every event to a queue."""

    def __init__(self, events: "queue.Queue[Notification]"):
        super().__init__()
        self.events = events

    def on_any_event(self, event: FileSystemEvent) -> None:
        self.events.put(translate_event(event))


class WatchdogNotifier:
    """Notifier backed by watchdog's native or polling observer."""

    def __init__(
        self,
        use_polling: bool = False,
        poll_interval: float = 1.0,
        wait_interval: float = 0.25,
        stop: Optional[threading.Event] = None,
    ):
        """
        Initialize notifier.

        Args:
            use_polling: Use PollingObserver instead of the platform observer
            poll_interval: Seconds between directory snapshots when polling
            wait_interval: How often the stream checks for close/observer death
            stop: Event shared with other components; setting it closes the stream
        """
        self.use_polling = use_polling
        self.poll_interval = poll_interval
        self.wait_interval = wait_interval
        self._closed = stop or threading.Event()
        self._observer: Optional[Observer] = None

    def _create_observer(self):
        if self.use_polling:
            return PollingObserver(timeout=self.poll_interval)
        return Observer()

    def subscribe(self, directory: Path) -> Iterator[Notification]:
        """Start the observer and return the event stream for ``directory``."""
        if self._observer is not None:
            raise RuntimeError("Notifier streams cannot be restarted")

        events: "queue.Queue[Notification]" = queue.Queue()
        observer = self._create_observer()
        observer.schedule(QueueEventHandler(events), str(directory), recursive=False)
        observer.daemon = True
        observer.start()
        self._observer = observer

        logger.info(f"Started watching: {directory}")
        return self._stream(observer, events)

    def _stream(self, observer, events: "queue.Queue[Notification]") -> Iterator[Notification]:
        try:
            while not self._closed.is_set():
                try:
                    yield events.get(timeout=self.wait_interval)
                except queue.Empty:
                    if not observer.is_alive():
                        yield WatchError(error=RuntimeError("File system observer stopped unexpectedly"))
                        return
        finally:
            observer.stop()
            if observer.is_alive():
                observer.join()
            logger.info("File system observer stopped")

    def close(self) -> None:
        """
        Close the event stream.

        Only sets a flag, so it is safe to call from a signal handler.
        """
        self._closed.set()
