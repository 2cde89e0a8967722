"""Git output analysis."""
from .conflicts import (
    CommandKind,
    DEFAULT_CONFLICT_KEYWORDS,
    classify,
    detect_command_kind,
    has_conflict_markers,
)

__all__ = [
    "CommandKind",
    "DEFAULT_CONFLICT_KEYWORDS",
    "classify",
    "detect_command_kind",
    "has_conflict_markers",
]
