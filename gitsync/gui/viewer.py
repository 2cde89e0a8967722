"""PySide6 window that shows the result of a sync run."""
from datetime import datetime
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel, QTextBrowser, QStatusBar
from PySide6.QtGui import QTextOption

from ..git.contracts import WorkflowOutcome
from .formatters import format_outcome
from .theme import STYLESHEET, header_style


class ReportWindow(QMainWindow):

    def __init__(self, outcome: WorkflowOutcome, repo_path: Path | str):
        self._app = QApplication.instance() or QApplication([])
        super().__init__()
        self._outcome = outcome
        self._repo_path = Path(repo_path)
        self._build_ui()

    def _build_ui(self) -> None:
        title = "Git sync complete" if self._outcome.success else "Git sync failed"
        self.setWindowTitle(f"{title}: {self._repo_path.name}")
        self.resize(860, 560)
        self.setStyleSheet(STYLESHEET)

        central = QWidget(objectName="central")
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addWidget(QLabel(title, objectName=header_style(self._outcome.success)))
        layout.addWidget(QLabel(str(self._repo_path), objectName="repo_path"))

        self._output = QTextBrowser()
        self._output.setReadOnly(True)
        self._output.setWordWrapMode(QTextOption.WrapMode.WrapAtWordBoundaryOrAnywhere)
        self._output.setHtml(format_outcome(self._outcome))
        layout.addWidget(self._output)

        statusbar = QStatusBar()
        self.setStatusBar(statusbar)
        statusbar.showMessage(datetime.now().strftime("%Y-%m-%d %H:%M:%S"))

    def run(self) -> None:
        self.show()
        self._app.exec()
