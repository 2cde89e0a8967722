"""Palette and Qt stylesheet for the sync report window."""

COLORS = {
    "bg_window": "#1a1b26",
    "bg_panel": "#24283b",
    "bg_log": "#1f2335",
    "text_primary": "#c0caf5",
    "text_muted": "#565f89",
    "accent_blue": "#7aa2f7",
    "accent_green": "#9ece6a",
    "accent_yellow": "#e0af68",
    "accent_red": "#f7768e",
    "border": "#292e42",
    "badge_bg": "#292e42",
}

MONO = "'Cascadia Code', 'Consolas', monospace"

# header object names, picked by outcome
HEADER_OK = "header_ok"
HEADER_FAILED = "header_failed"

STYLESHEET = f"""
QMainWindow, QWidget#central {{
    background-color: {COLORS['bg_window']};
}}
QLabel#{HEADER_OK}, QLabel#{HEADER_FAILED} {{
    background-color: {COLORS['bg_panel']};
    padding: 8px 14px;
    font-family: {MONO};
    font-size: 14px;
    font-weight: bold;
}}
QLabel#{HEADER_OK} {{
    color: {COLORS['accent_green']};
    border-bottom: 2px solid {COLORS['accent_green']};
}}
QLabel#{HEADER_FAILED} {{
    color: {COLORS['accent_red']};
    border-bottom: 2px solid {COLORS['accent_red']};
}}
QLabel#repo_path {{
    background-color: {COLORS['bg_panel']};
    color: {COLORS['text_muted']};
    padding: 4px 14px 8px 14px;
    font-family: {MONO};
    font-size: 12px;
}}
QTextBrowser {{
    background-color: {COLORS['bg_log']};
    color: {COLORS['text_primary']};
    font-family: {MONO};
    font-size: 13px;
    border: none;
    padding: 12px;
}}
QStatusBar {{
    background-color: {COLORS['bg_panel']};
    color: {COLORS['text_muted']};
    font-family: {MONO};
    font-size: 12px;
    border-top: 1px solid {COLORS['border']};
}}
"""


def header_style(success: bool) -> str:
    """Object name of the header label for an outcome."""
    return HEADER_OK if success else HEADER_FAILED
