import logging
from pathlib import Path

from .contracts import CommandResult, UpstreamInfo
from .runner import ProcessRunner

logger = logging.getLogger(__name__)


class GitOperations:
    """One method per git subcommand the sync workflow issues."""

    HEAD_BRANCH_PREFIX = "HEAD branch:"

    def __init__(self, repo_path: Path, runner: ProcessRunner | None = None,
                 timeout: float | None = None) -> None:
        self.repo_path = repo_path
        self.runner = runner or ProcessRunner()
        self.timeout = timeout
        self.history: list[list[str]] = []

    def _run(self, args: list[str], timeout: float | None = None) -> CommandResult:
        self.history.append(list(args))
        effective = timeout if timeout is not None else self.timeout
        return self.runner.run(["git", *args], self.repo_path, effective)

    def stash_push(self, marker: str, timeout: float | None = None) -> CommandResult:
        return self._run(["stash", "-u", "-m", marker], timeout)

    @staticmethod
    def stash_created(result: CommandResult, marker: str) -> bool:
        """git prints the marker in its "Saved working directory" line only when an entry was made."""
        return result.ok and bool(marker) and marker in result.stdout

    def stash_apply(self) -> CommandResult:
        return self._run(["stash", "apply"])

    def stash_pop(self) -> CommandResult:
        return self._run(["stash", "pop"])

    def pull_rebase(self, upstream: UpstreamInfo) -> CommandResult:
        return self._run(upstream.pull_args())

    def tracking_upstream(self) -> tuple[str, str] | None:
        result = self._run(["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"])
        upstream = result.stdout.strip()
        if not result.ok or "/" not in upstream:
            return None
        remote, branch = upstream.split("/", 1)
        return remote, branch

    def list_remotes(self) -> list[str]:
        result = self._run(["remote"])
        return [r.strip() for r in result.stdout.splitlines() if r.strip()]

    def current_branch(self) -> str | None:
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        branch = result.stdout.strip()
        if not result.ok or not branch or branch == "HEAD":
            return None
        return branch

    def remote_head_branch(self, remote: str) -> str | None:
        result = self._run(["remote", "show", remote])
        if not result.ok:
            return None
        for line in result.stdout.splitlines():
            if self.HEAD_BRANCH_PREFIX in line:
                name = line.split(":", 1)[1].strip()
                # "(unknown)" is printed when the remote HEAD is not set
                if name and not name.startswith("("):
                    return name
        return None

    def remote_has_branch(self, remote: str, branch: str) -> bool:
        result = self._run(["ls-remote", "--heads", remote, branch])
        return bool(result.stdout.strip())

    def resolve_upstream(self, fallback_branch: str) -> UpstreamInfo:
        """Tracking upstream when configured, otherwise a best guess at remote and branch."""
        tracking = self.tracking_upstream()
        if tracking:
            remote, branch = tracking
            return UpstreamInfo(remote_name=remote, branch_name=branch, has_tracking_upstream=True)

        remotes = self.list_remotes()
        if "origin" in remotes:
            remote = "origin"
        else:
            remote = remotes[0] if remotes else None

        branch = self.current_branch()
        if not branch and remote:
            branch = self.remote_head_branch(remote)
        if not branch:
            branch = fallback_branch

        if remote and not self.remote_has_branch(remote, branch):
            head = self.remote_head_branch(remote)
            if head:
                logger.info(f"{remote} has no branch '{branch}', using remote HEAD '{head}'")
                branch = head

        return UpstreamInfo(
            remote_name=remote or "origin",
            branch_name=branch,
            has_tracking_upstream=False,
        )
