from .formatters import format_outcome

__all__ = ["format_outcome"]
