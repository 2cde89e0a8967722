from .config import SyncConfig
from .repo import find_repo_root
from .git import GitSyncWorkflow, WorkflowOutcome, FailureKind, run_git_sync_workflow
from .output import classify

__all__ = [
    "SyncConfig",
    "find_repo_root",
    "GitSyncWorkflow",
    "WorkflowOutcome",
    "FailureKind",
    "run_git_sync_workflow",
    "classify",
]
