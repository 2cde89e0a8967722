"""Tests for ProcessRunner against real child processes."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gitsync.git.runner import ProcessRunner, ProcessStartError


@pytest.fixture
def runner() -> ProcessRunner:
    return ProcessRunner()


def python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestCapture:

    def test_captures_stdout_and_stderr(self, runner: ProcessRunner, tmp_path: Path) -> None:
        result = runner.run(python("import sys; print('out'); print('err', file=sys.stderr)"), tmp_path)
        assert result.exit_code == 0
        assert result.stdout.strip() == "out"
        assert result.stderr.strip() == "err"
        assert result.timed_out is False
        assert result.ok is True

    def test_nonzero_exit(self, runner: ProcessRunner, tmp_path: Path) -> None:
        result = runner.run(python("import sys; sys.exit(3)"), tmp_path)
        assert result.exit_code == 3
        assert result.ok is False
        assert result.stderr == ""

    def test_runs_in_working_directory(self, runner: ProcessRunner, tmp_path: Path) -> None:
        result = runner.run(python("import os; print(os.getcwd())"), tmp_path)
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    def test_large_output_is_drained(self, runner: ProcessRunner, tmp_path: Path) -> None:
        code = "import sys; sys.stdout.write('x' * 500000); sys.stderr.write('y' * 500000)"
        result = runner.run(python(code), tmp_path, timeout=30)
        assert len(result.stdout) == 500000
        assert len(result.stderr) == 500000


class TestTimeout:

    def test_timeout_result(self, runner: ProcessRunner, tmp_path: Path) -> None:
        result = runner.run(python("import time; print('partial', flush=True); time.sleep(30)"), tmp_path, timeout=0.5)
        assert result.timed_out is True
        assert result.stdout == ""
        assert "timed out" in result.stderr
        assert result.ok is False

    def test_process_is_killed_and_reaped(self, runner: ProcessRunner, tmp_path: Path) -> None:
        process = MagicMock()
        process.communicate.side_effect = [subprocess.TimeoutExpired("git", 1), ("", "")]
        with patch("gitsync.git.runner.subprocess.Popen", return_value=process):
            result = runner.run(["git", "pull", "--rebase"], tmp_path, timeout=1)

        process.kill.assert_called_once()
        assert process.communicate.call_count == 2
        assert result.timed_out is True
        assert result.stderr == "Command timed out after 1s: git pull --rebase"


class TestStartFailure:

    def test_missing_binary_raises(self, runner: ProcessRunner, tmp_path: Path) -> None:
        with pytest.raises(ProcessStartError) as exc_info:
            runner.run(["definitely-not-a-real-binary-7f3a"], tmp_path)
        assert exc_info.value.command == ["definitely-not-a-real-binary-7f3a"]
        assert isinstance(exc_info.value.cause, OSError)

    def test_missing_working_directory_raises(self, runner: ProcessRunner, tmp_path: Path) -> None:
        with pytest.raises(ProcessStartError):
            runner.run(python("print(1)"), tmp_path / "missing")
