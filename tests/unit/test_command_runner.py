import subprocess
import sys

import pytest

from domains.file_queue.models import NonZeroExit, SpawnFailure, Success
from domains.file_queue.processors import CommandRunner
from tests.conftest import EXIT_0, EXIT_2, messages, python_command


def test_build_argv_appends_path_last():
    runner = CommandRunner(["convert", "--quiet"])

    assert runner.build_argv("in/a.png") == ["convert", "--quiet", "in/a.png"]
    assert runner.command == ["convert", "--quiet"]


def test_empty_command_is_rejected():
    with pytest.raises(ValueError):
        CommandRunner([])


def test_exit_zero_is_success(log_records):
    outcome = CommandRunner(EXIT_0).run("job.txt")

    assert outcome == Success()
    assert outcome.ok
    assert f"Executing: {EXIT_0 + ['job.txt']}" in messages(log_records)


def test_path_is_passed_to_command(tmp_path):
    target = tmp_path / "job.txt"
    target.write_text("payload")
    runner = CommandRunner(python_command("import sys; sys.exit(0 if open(sys.argv[1]).read() == 'payload' else 3)"))

    assert runner.run(str(target)) == Success()


def test_non_zero_exit_keeps_code():
    outcome = CommandRunner(EXIT_2).run("job.txt")

    assert outcome == NonZeroExit(code=2)
    assert not outcome.ok


def test_missing_executable_is_spawn_failure(tmp_path):
    outcome = CommandRunner([str(tmp_path / "no-such-command")]).run("job.txt")

    assert isinstance(outcome, SpawnFailure)
    assert isinstance(outcome.error, FileNotFoundError)
    assert not outcome.ok


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_non_executable_file_is_spawn_failure(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/sh\nexit 0\n")
    script.chmod(0o644)

    outcome = CommandRunner([str(script)]).run("job.txt")

    assert isinstance(outcome, SpawnFailure)
    assert isinstance(outcome.error, PermissionError)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
def test_killed_child_reports_negative_code():
    outcome = CommandRunner(python_command("import os, signal; os.kill(os.getpid(), signal.SIGKILL)")).run("job.txt")

    assert isinstance(outcome, NonZeroExit)
    assert outcome.code < 0


def test_timeout_kills_child_and_reports_spawn_failure(log_records):
    runner = CommandRunner(python_command("import time; time.sleep(30)"), timeout=0.5)

    outcome = runner.run("job.txt")

    assert isinstance(outcome, SpawnFailure)
    assert isinstance(outcome.error, subprocess.TimeoutExpired)
    assert any("timed out" in message for message in messages(log_records))
