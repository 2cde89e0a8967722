from dataclasses import dataclass, field
from enum import Enum


class FailureKind(Enum):
    PROCESS_START = "process_start"
    NON_ZERO_EXIT = "non_zero_exit"
    TIMEOUT = "timeout"
    CONFLICT = "conflict"


class SyncState(Enum):
    INIT = "init"
    STASHING = "stashing"
    RESOLVING_UPSTREAM = "resolving_upstream"
    PULLING = "pulling"
    POPPING_STASH = "popping_stash"
    DONE = "done"
    STASH_FAILED = "stash_failed"
    STASHED_ROLLBACK = "stashed_rollback"
    CONFLICT_ROLLBACK = "conflict_rollback"


@dataclass
class CommandResult:
    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and not self.timed_out

    @property
    def combined_output(self) -> str:
        return f"{self.stdout}\n{self.stderr}"

    @property
    def error_text(self) -> str:
        """stderr when present, otherwise stdout."""
        return self.stderr.strip() or self.stdout.strip()


@dataclass
class UpstreamInfo:
    remote_name: str | None
    branch_name: str
    has_tracking_upstream: bool

    def pull_args(self) -> list[str]:
        if self.has_tracking_upstream:
            return ["pull", "--rebase"]
        return ["pull", "--rebase", self.remote_name or "origin", self.branch_name]


@dataclass
class WorkflowOutcome:
    success: bool
    summary: str = ""
    message: str = ""
    failure_kind: FailureKind | None = None
    guidance: str = ""
    steps: list[str] = field(default_factory=list)
    commands: list[list[str]] = field(default_factory=list)
    client_launched: bool = False
    final_state: SyncState = SyncState.INIT

    @classmethod
    def succeeded(cls, summary: str, **kwargs) -> "WorkflowOutcome":
        return cls(success=True, summary=summary, final_state=SyncState.DONE, **kwargs)

    @classmethod
    def failed(cls, message: str, kind: FailureKind, **kwargs) -> "WorkflowOutcome":
        return cls(success=False, message=message, failure_kind=kind, **kwargs)

    @property
    def text(self) -> str:
        return self.summary if self.success else self.message

    def to_dict(self) -> dict:
        """Serialize for JSON transport."""
        return {
            "success": self.success,
            "summary": self.summary,
            "message": self.message,
            "failure_kind": self.failure_kind.value if self.failure_kind else None,
            "guidance": self.guidance,
            "steps": self.steps,
            "commands": [" ".join(c) for c in self.commands],
            "client_launched": self.client_launched,
            "final_state": self.final_state.value,
        }
