"""Conflict detection in git output and the remediation text shown for it."""

from __future__ import annotations

from enum import Enum


class CommandKind(Enum):
    """Kind of git command, selects which guidance applies."""

    REBASE_PULL = "rebase_pull"
    STASH_POP = "stash_pop"
    OTHER = "other"


DEFAULT_CONFLICT_KEYWORDS: tuple[str, ...] = (
    "conflict",
    "could not apply",
    "rebase",
    "overwritten",
    "failed to merge",
    "冲突",
    "合并冲突",
    "无法应用",
    "拒绝",
)

REBASE_GUIDANCE = "\n".join([
    "1) Open your local git client or use the command line:",
    "   - Check status: git status",
    "   - Mark resolved files: git add <conflicted file>",
    "   - Continue the rebase: git rebase --continue",
    "   - Or give up on it: git rebase --abort",
    "",
    "Note: in the conflict, Mine = your local changes, Theirs = the updated remote version.",
])

STASH_POP_GUIDANCE = "\n".join([
    "1) After a conflict the stash entry is usually kept; it still shows in git stash list.",
    "2) Resolve conflicts: edit the conflicted files, keep what you need, then run: git add <conflicted file>",
    "3) Once the working tree looks right, drop the stash entry: git stash drop stash@{N}",
    "4) If untracked files conflict, back them up or rename them by hand before continuing.",
])


def _as_argv(command: str | list[str]) -> list[str]:
    if isinstance(command, str):
        return command.split()
    return list(command)


def detect_command_kind(command: str | list[str]) -> CommandKind:
    """Categorise a git command given as a string or argv list (leading 'git' optional)."""
    argv = _as_argv(command)
    if argv and argv[0] == "git":
        argv = argv[1:]
    if argv[:1] == ["pull"] and "--rebase" in argv:
        return CommandKind.REBASE_PULL
    if argv[:2] == ["stash", "pop"]:
        return CommandKind.STASH_POP
    return CommandKind.OTHER


def has_conflict_markers(output_text: str, keywords: tuple[str, ...] | list[str] = DEFAULT_CONFLICT_KEYWORDS) -> bool:
    text = (output_text or "").lower()
    return any(keyword.lower() in text for keyword in keywords if keyword)


def classify(
    command: str | list[str],
    output_text: str,
    keywords: tuple[str, ...] | list[str] = DEFAULT_CONFLICT_KEYWORDS,
) -> str:
    """Return remediation guidance for a failed command, or "" when none applies."""
    kind = detect_command_kind(command)
    if kind is CommandKind.OTHER:
        return ""
    if not has_conflict_markers(output_text, keywords):
        return ""
    if kind is CommandKind.REBASE_PULL:
        return REBASE_GUIDANCE
    return STASH_POP_GUIDANCE
