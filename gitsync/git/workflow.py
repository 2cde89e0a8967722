import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..config import SyncConfig
from ..output.conflicts import classify
from .clients import ClientLauncher
from .contracts import CommandResult, FailureKind, SyncState, WorkflowOutcome
from .operations import GitOperations
from .runner import ProcessRunner, ProcessStartError

logger = logging.getLogger(__name__)

TIMEOUT_HINT = "Check the network or the repository state, then try again."
POP_FAILED_NOTE = "stash pop failed; tried stash apply to restore local changes (the stash entry was kept)."
PULL_FAILED_NOTE = "pull --rebase failed; tried stash apply to restore local changes (the stash entry was kept)."
PULL_FAILED_CLEAN_NOTE = "pull --rebase failed; there were no local changes to restore."
NOTHING_STASHED = "No local changes to stash; stash pop will be skipped"


@dataclass
class SyncRun:
    """Per-run state, threaded through the step methods."""
    ops: GitOperations
    launcher: ClientLauncher
    steps: list[str] = field(default_factory=list)
    state: SyncState = SyncState.INIT
    stashed: bool = False


class GitSyncWorkflow:
    """Stash local changes, pull with rebase, then pop the stash back."""

    def __init__(
        self,
        repo_path: Path,
        config: SyncConfig | None = None,
        runner: ProcessRunner | None = None,
        launcher_factory: Callable[[], ClientLauncher] | None = None,
    ) -> None:
        self.repo_path = Path(repo_path)
        self.config = config or SyncConfig.load(self.repo_path)
        self.runner = runner or ProcessRunner()
        self._launcher_factory = launcher_factory or self._default_launcher

    def _default_launcher(self) -> ClientLauncher:
        return ClientLauncher(
            enabled=self.config.open_gui_client,
            search_roots=self.config.client_search_roots,
        )

    def run(self) -> WorkflowOutcome:
        ops = GitOperations(self.repo_path, self.runner, timeout=self.config.command_timeout)
        run = SyncRun(ops=ops, launcher=self._launcher_factory())
        try:
            outcome = self._run_steps(run)
        except ProcessStartError as e:
            logger.error(str(e))
            outcome = WorkflowOutcome.failed(
                f"Command: {' '.join(e.command)}\nError: {e.cause}",
                FailureKind.PROCESS_START,
                final_state=run.state,
            )
        outcome.steps = run.steps
        outcome.commands = [["git", *args] for args in ops.history]
        outcome.client_launched = run.launcher.launched is not None
        return outcome

    def _run_steps(self, run: SyncRun) -> WorkflowOutcome:
        ops, steps = run.ops, run.steps

        run.state = SyncState.STASHING
        logger.info(f"Stashing local changes in {self.repo_path}")
        marker = self.config.stash_marker
        stash_args = ["stash", "-u", "-m", marker]
        stash = ops.stash_push(marker, timeout=self.config.init_timeout)
        self._record(steps, stash_args, stash)
        if not stash.ok:
            return self._fail(run, stash_args, stash, SyncState.STASH_FAILED)
        run.stashed = ops.stash_created(stash, marker)
        if not run.stashed:
            logger.info(NOTHING_STASHED)
            steps.append(NOTHING_STASHED)

        run.state = SyncState.RESOLVING_UPSTREAM
        logger.info("Resolving upstream")
        upstream = ops.resolve_upstream(self.config.fallback_branch)
        pull_args = upstream.pull_args()
        if upstream.has_tracking_upstream:
            steps.append("Using tracking upstream: git pull --rebase")
        else:
            steps.append(f"Using {upstream.remote_name}/{upstream.branch_name}: git {' '.join(pull_args)}")

        run.state = SyncState.PULLING
        logger.info(f"Running git {' '.join(pull_args)}")
        pull = ops.pull_rebase(upstream)
        self._record(steps, pull_args, pull)
        if not pull.ok:
            if run.stashed:
                self._restore_stash(run)
                note = PULL_FAILED_NOTE
            else:
                note = PULL_FAILED_CLEAN_NOTE
            return self._fail(run, pull_args, pull, SyncState.STASHED_ROLLBACK, note)

        if run.stashed:
            run.state = SyncState.POPPING_STASH
            logger.info("Popping stash")
            pop = ops.stash_pop()
            self._record(steps, ["stash", "pop"], pop)
            if not pop.ok:
                self._restore_stash(run)
                return self._fail(run, ["stash", "pop"], pop, SyncState.CONFLICT_ROLLBACK, POP_FAILED_NOTE)

        run.state = SyncState.DONE
        logger.info("Sync complete")
        return WorkflowOutcome.succeeded("\n".join(steps))

    def _record(self, steps: list[str], args: list[str], result: CommandResult) -> None:
        steps.append(f"$ git {' '.join(args)}")
        if result.stdout.strip():
            steps.append(f"stdout:\n{result.stdout.strip()}")
        if result.stderr.strip():
            steps.append(f"stderr:\n{result.stderr.strip()}")

    def _restore_stash(self, run: SyncRun) -> None:
        apply = run.ops.stash_apply()
        self._record(run.steps, ["stash", "apply"], apply)
        if not apply.ok:
            logger.warning(f"stash apply failed, local changes remain in the stash: {apply.error_text}")

    def _fail(
        self,
        run: SyncRun,
        args: list[str],
        result: CommandResult,
        state: SyncState,
        note: str = "",
    ) -> WorkflowOutcome:
        run.state = state
        command = f"git {' '.join(args)}"
        error = result.error_text
        if result.timed_out:
            guidance = ""
        else:
            guidance = classify(args, result.combined_output, self.config.conflict_keywords)

        if result.timed_out:
            kind = FailureKind.TIMEOUT
        elif guidance:
            kind = FailureKind.CONFLICT
        else:
            kind = FailureKind.NON_ZERO_EXIT

        parts = [note] if note else []
        parts.append(f"Command: {command}\nError: {error}")
        if result.timed_out:
            parts.append(f"Suggested fix:\n{TIMEOUT_HINT}")
        if guidance:
            parts.append(f"Suggested fix:\n{guidance}")
            run.launcher.launch(self.repo_path)

        logger.error(f"{command} failed ({kind.value})")
        return WorkflowOutcome.failed(
            "\n\n".join(parts),
            kind,
            guidance=guidance,
            final_state=state,
        )


def run_git_sync_workflow(repo_path: Path | str, config: SyncConfig | None = None) -> WorkflowOutcome:
    return GitSyncWorkflow(Path(repo_path), config).run()
