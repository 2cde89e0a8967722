"""Shared fixtures: a scripted stand-in for the git process runner."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitsync.git.contracts import CommandResult


OK = CommandResult(exit_code=0, stdout="", stderr="")


class FakeRunner:
    """Answers git commands from a table keyed by the space-joined arguments after 'git'."""

    def __init__(self, responses: dict[str, CommandResult] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    def run(self, args: list[str], cwd: Path | str, timeout: float | None = None) -> CommandResult:
        self.calls.append(list(args))
        self.timeouts.append(timeout)
        key = " ".join(args[1:])
        if key in self.responses:
            return self.responses[key]
        if args[1:4] == ["stash", "-u", "-m"]:
            return saved(args[4])
        return OK

    def git_calls(self) -> list[str]:
        return [" ".join(call[1:]) for call in self.calls]


class FakeLauncher:
    """Records launch requests and honours the single-shot rule."""

    def __init__(self) -> None:
        self.requests = 0
        self.launched = None

    def launch(self, repo_path: Path | str) -> bool:
        self.requests += 1
        if self.launched is not None:
            return False
        self.launched = "fake-client"
        return True


def ok(stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(exit_code=0, stdout=stdout, stderr=stderr)


def saved(marker: str = "UnityToolbarAuto") -> CommandResult:
    return ok(f"Saved working directory and index state On main: {marker}\n")


NOTHING_TO_SAVE = CommandResult(exit_code=0, stdout="No local changes to save\n", stderr="")


def fail(stderr: str = "", stdout: str = "", exit_code: int = 1) -> CommandResult:
    return CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    (tmp_path / ".git").mkdir()
    return tmp_path
