"""Command-line interface for dirqd."""

import argparse
from pathlib import Path
from typing import Optional

from app.utils.config import QueueConfig, Settings


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""

    parser = argparse.ArgumentParser(
        prog="dirqd",
        description="Invoke processes based on incoming files in a directory.",
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="Directory to watch.",
    )
    parser.add_argument(
        "command",
        nargs="+",
        help="Command to invoke; the file path is appended as the last argument.",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        default="*",
        help="Files must match this shell pattern (default: *).",
    )
    parser.add_argument(
        "-P",
        "--processed-queue",
        type=Path,
        default=None,
        help="After successful processing, move files here. Cannot be used with --delete.",
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="After successful processing, delete file. Cannot be used with --processed-queue.",
    )
    parser.add_argument(
        "-E",
        "--error-queue",
        type=Path,
        default=None,
        help="If invoking command fails, move files here. Cannot be used with --delete-on-error.",
    )
    parser.add_argument(
        "--delete-on-error",
        action="store_true",
        help="If invoking command fails, delete file. Cannot be used with --error-queue.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill the command after this many seconds and treat the file as failed.",
    )
    parser.add_argument(
        "--poll",
        action="store_true",
        help="Detect changes by polling instead of native filesystem events.",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=None,
        help="Polling interval in seconds when --poll is given.",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, settings: Settings) -> QueueConfig:
    """
    Validate parsed arguments into a QueueConfig.

    Raises pydantic.ValidationError when the combination is invalid.
    """
    timeout = args.timeout if args.timeout is not None else settings.command_timeout

    return QueueConfig(
        directory=args.directory,
        command=args.command,
        pattern=args.pattern,
        processed_queue=args.processed_queue,
        delete_on_success=args.delete,
        error_queue=args.error_queue,
        delete_on_error=args.delete_on_error,
        command_timeout=timeout,
    )
