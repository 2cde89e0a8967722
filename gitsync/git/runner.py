"""External process execution with captured output and optional timeout."""
import logging
import subprocess
from pathlib import Path

from .contracts import CommandResult

logger = logging.getLogger(__name__)

KILL_WAIT_SECONDS = 2


class ProcessStartError(Exception):
    """The executable could not be started at all (missing binary, permissions)."""

    def __init__(self, args: list[str], cause: OSError) -> None:
        self.command = list(args)
        self.cause = cause
        super().__init__(f"Failed to start '{' '.join(self.command)}': {cause}")


def _creationflags() -> int:
    try:
        return subprocess.CREATE_NO_WINDOW
    except AttributeError:
        return 0


class ProcessRunner:
    """Runs one command to completion and returns its captured result."""

    def run(self, args: list[str], cwd: Path | str, timeout: float | None = None) -> CommandResult:
        command = " ".join(args)
        logger.debug(f"Running '{command}' in {cwd}")

        try:
            process = subprocess.Popen(
                args,
                cwd=str(cwd),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                creationflags=_creationflags(),
            )
        except OSError as e:
            raise ProcessStartError(args, e) from e

        try:
            stdout, stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            process.kill()
            try:
                process.communicate(timeout=KILL_WAIT_SECONDS)
            except subprocess.TimeoutExpired:
                logger.warning(f"Process did not exit after kill: {command}")
            logger.warning(f"Command timed out after {timeout}s: {command}")
            return CommandResult(
                exit_code=-1,
                stdout="",
                stderr=f"Command timed out after {timeout}s: {command}",
                timed_out=True,
            )

        if process.returncode != 0:
            logger.warning(f"'{command}' exited with {process.returncode}")

        return CommandResult(
            exit_code=process.returncode,
            stdout=stdout or "",
            stderr=stderr or "",
        )
