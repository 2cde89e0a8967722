from pathlib import Path


def find_repo_root(start: Path | str) -> Path:
    """Nearest directory at or above start that holds a .git entry; start itself if none does."""
    start_dir = Path(start).resolve()
    for candidate in (start_dir, *start_dir.parents):
        # .git is a file in worktrees and submodules
        if (candidate / ".git").exists():
            return candidate
    return start_dir
