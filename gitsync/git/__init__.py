from .contracts import CommandResult, FailureKind, SyncState, UpstreamInfo, WorkflowOutcome
from .runner import ProcessRunner, ProcessStartError
from .operations import GitOperations
from .clients import ClientKind, ClientLauncher, GuiClient, find_gui_client
from .workflow import GitSyncWorkflow, run_git_sync_workflow

__all__ = [
    "CommandResult",
    "FailureKind",
    "SyncState",
    "UpstreamInfo",
    "WorkflowOutcome",
    "ProcessRunner",
    "ProcessStartError",
    "GitOperations",
    "ClientKind",
    "ClientLauncher",
    "GuiClient",
    "find_gui_client",
    "GitSyncWorkflow",
    "run_git_sync_workflow",
]
