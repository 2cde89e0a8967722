"""WorkflowOutcome → HTML for the report window."""
from ..git.contracts import WorkflowOutcome
from .theme import COLORS


def _c(key: str) -> str:
    return COLORS[key]


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _span(text: str, color: str) -> str:
    return f"<span style='color:{color};'>{_escape(text)}</span>"


def _badge(label: str, color: str) -> str:
    return (
        f"<span style='background:{_c('badge_bg')}; color:{color}; "
        f"padding:2px 8px; border-radius:3px; font-size:12px; font-weight:bold;'>{label}</span>"
    )


def _block(title: str, body: str, color: str) -> str:
    return (
        f"<div style='background:{_c('bg_panel')}; border:1px solid {_c('border')}; "
        f"border-radius:6px; padding:12px 16px; margin:8px 0;'>"
        f"<div style='color:{color}; font-weight:bold; margin-bottom:8px;'>{title}</div>"
        f"<pre style='color:{_c('text_primary')}; white-space:pre-wrap; margin:0;'>{_escape(body)}</pre>"
        "</div>"
    )


def format_step(step: str) -> str:
    if step.startswith("$ "):
        return _span(step, _c("accent_blue")) + "<br>"
    if step.startswith("stderr:"):
        return f"<pre style='margin:0 0 6px 12px;'>{_span(step, _c('accent_yellow'))}</pre>"
    return f"<pre style='margin:0 0 6px 12px;'>{_span(step, _c('text_muted'))}</pre>"


def format_outcome(outcome: WorkflowOutcome) -> str:
    """Full report: status badge, step log, then the failure message and guidance."""
    if outcome.success:
        header = _badge("OK", _c("accent_green")) + " " + _span("Sync complete", _c("text_primary"))
    else:
        kind = outcome.failure_kind.value if outcome.failure_kind else "failed"
        header = _badge("FAILED", _c("accent_red")) + " " + _span(kind, _c("text_muted"))

    parts = [header, "<br><br>"]
    parts.extend(format_step(step) for step in outcome.steps)

    if not outcome.success:
        message = outcome.message
        if outcome.guidance:
            # guidance is rendered in its own block
            message = message.replace(f"Suggested fix:\n{outcome.guidance}", "").rstrip()
        parts.append(_block("Error", message, _c("accent_red")))
    if outcome.guidance:
        parts.append(_block("Suggested fix", outcome.guidance, _c("accent_yellow")))
    if outcome.client_launched:
        parts.append(_span("A local git client was opened for conflict resolution.", _c("accent_blue")))
    return "".join(parts)
