"""
File Queue Watchers

- notifier.py - watchdog-backed change notification stream
- driver.py - Initial scan plus one scan per qualifying event
"""

from domains.file_queue.watchers.driver import DriverState, WatchDriver
from domains.file_queue.watchers.notifier import Notifier, WatchdogNotifier

__all__ = ["DriverState", "Notifier", "WatchDriver", "WatchdogNotifier"]
