"""Locating and launching a local graphical git client for conflict resolution."""
import logging
import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class ClientKind(Enum):
    TORTOISE_GIT = "tortoisegit"
    SOURCE_TREE = "sourcetree"
    GIT_GUI = "git-gui"


@dataclass
class GuiClient:
    kind: ClientKind
    executable_path: str

    def launch_args(self, repo_path: Path | str) -> list[str]:
        repo = str(repo_path)
        if self.kind == ClientKind.TORTOISE_GIT:
            return [self.executable_path, f'/path:"{repo}"', "/command:resolve"]
        if self.kind == ClientKind.SOURCE_TREE:
            return [self.executable_path, "-f", repo]
        return [self.executable_path, "gui"]

    def launch_cwd(self, repo_path: Path | str) -> str | None:
        if self.kind == ClientKind.TORTOISE_GIT:
            return None
        return str(repo_path)


GIT_GUI_FALLBACK = GuiClient(kind=ClientKind.GIT_GUI, executable_path="git")


def _program_dirs() -> list[Path]:
    dirs = []
    for var in ("ProgramFiles", "ProgramFiles(x86)"):
        value = os.environ.get(var)
        if value:
            dirs.append(Path(value))
    return dirs


def _candidates(extra_roots: list[str]) -> list[tuple[ClientKind, Path]]:
    program_dirs = _program_dirs()
    local_app_data = os.environ.get("LOCALAPPDATA")
    extra = [Path(root) for root in extra_roots]

    candidates = [
        (ClientKind.TORTOISE_GIT, root / "TortoiseGit" / "bin" / "TortoiseGitProc.exe")
        for root in program_dirs + extra
    ]
    source_tree_roots = program_dirs + ([Path(local_app_data)] if local_app_data else []) + extra
    candidates += [
        (ClientKind.SOURCE_TREE, root / "SourceTree" / "SourceTree.exe")
        for root in source_tree_roots
    ]
    return candidates


def find_gui_client(search_roots: list[str] | None = None) -> GuiClient | None:
    """Probe the known install locations, TortoiseGit first, then SourceTree."""
    for kind, path in _candidates(search_roots or []):
        if path.is_file():
            logger.debug(f"Found {kind.value} at {path}")
            return GuiClient(kind=kind, executable_path=str(path))
    return None


class ClientLauncher:
    """Opens at most one git client per workflow run."""

    def __init__(self, enabled: bool = True, search_roots: list[str] | None = None) -> None:
        self.enabled = enabled
        self.search_roots = search_roots or []
        self.launched: GuiClient | None = None
        self._attempted = False

    @property
    def attempted(self) -> bool:
        return self._attempted

    def launch(self, repo_path: Path | str) -> bool:
        """Start the first available client; returns False on every call after the first."""
        if self._attempted or not self.enabled:
            return False
        self._attempted = True

        client = find_gui_client(self.search_roots) or GIT_GUI_FALLBACK
        args = client.launch_args(repo_path)
        logger.info(f"Opening {client.kind.value} for {repo_path}")
        try:
            subprocess.Popen(
                args,
                cwd=client.launch_cwd(repo_path),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.warning(f"Failed to open local git client: {e}")
            return False

        self.launched = client
        return True
