import sys
from pathlib import Path

import pytest
from loguru import logger

from app.utils.config import QueueConfig


def python_command(code: str) -> list[str]:
    """Command template running ``code`` with the current interpreter."""
    return [sys.executable, "-c", code]


EXIT_0 = python_command("import sys; sys.exit(0)")
EXIT_2 = python_command("import sys; sys.exit(2)")


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


def messages(records) -> list[str]:
    return [record["message"] for record in records]


@pytest.fixture
def queue_dirs(tmp_path):
    """Watched directory plus processed/error queues."""
    incoming = tmp_path / "incoming"
    processed = tmp_path / "processed"
    failed = tmp_path / "failed"
    for path in (incoming, processed, failed):
        path.mkdir()
    return incoming, processed, failed


@pytest.fixture
def make_config(queue_dirs):
    """Build a QueueConfig that moves files into the queue directories."""
    incoming, processed, failed = queue_dirs

    def _make(command=EXIT_0, **overrides) -> QueueConfig:
        values = dict(
            directory=incoming,
            command=command,
            processed_queue=processed,
            error_queue=failed,
        )
        values.update(overrides)
        return QueueConfig(**values)

    return _make


def names(directory: Path) -> set[str]:
    return {path.name for path in directory.iterdir()}
