"""
dirqd - Directory queue daemon

Watches a directory and runs a command for every file dropped into it:
- Files matching the pattern are passed to the command as the last argument
- Exit status 0 moves the file to the processed queue (or deletes it)
- Any failure moves the file to the error queue (or deletes it)
"""

import signal
import sys
import threading
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from app.cli import build_config, parse_args
from app.utils.config import QueueConfig, get_settings
from app.utils.log import configure_logging
from domains.file_queue.scanners import DirectoryScanner
from domains.file_queue.watchers import WatchDriver, WatchdogNotifier


def log_startup(config: QueueConfig) -> None:
    """Log the effective configuration."""
    logger.info(f"Directory: {config.directory}")
    logger.info(f"Command: {config.command}")
    logger.info(f"Pattern: {config.pattern}")

    if config.delete_on_success:
        logger.info("Files will be deleted after successful processing")
    else:
        logger.info(f"Processed queue: {config.processed_queue}")

    if config.delete_on_error:
        logger.info("Files will be deleted on error")
    else:
        logger.info(f"Error queue: {config.error_queue}")

    if config.command_timeout is not None:
        logger.info(f"Command timeout: {config.command_timeout}s")

    for queue_dir in (config.processed_queue, config.error_queue):
        if queue_dir is not None and not queue_dir.is_dir():
            logger.warning(f"Queue directory does not exist yet: {queue_dir}")


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the dirqd daemon."""

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        for error in e.errors():
            logger.error(f"Invalid settings: {error['msg']}")
        return 1

    configure_logging(settings.get_log_level())

    args = parse_args(argv)

    try:
        config = build_config(args, settings)
    except ValidationError as e:
        for error in e.errors():
            logger.error(f"Invalid configuration: {error['msg']}")
        return 1

    log_startup(config)

    # Set by SIGINT/SIGTERM: closes the event stream and stops the current scan
    stop = threading.Event()
    notifier = WatchdogNotifier(
        use_polling=args.poll or settings.use_polling,
        poll_interval=args.poll_interval or settings.poll_interval,
        stop=stop,
    )
    driver = WatchDriver(DirectoryScanner(config, stop=stop), notifier, config.directory)

    # Must not log: may run while loguru's handler lock is held
    def _signal_handler(signum, frame):  # noqa: D401
        stop.set()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    try:
        return driver.run()
    except OSError as e:
        logger.error(f"Could not watch directory {config.directory}: {e}")
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI bridge
    sys.exit(main())
