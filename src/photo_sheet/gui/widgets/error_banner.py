"""
Transient error banner.

Shows one Notice at a time and hides itself after the notice's timeout.
A new notice restarts the timer.
"""
from PySide6.QtWidgets import QLabel
from PySide6.QtCore import QTimer

from photo_sheet.builder.controller import Notice
from photo_sheet.gui.styles.theme import get_styles


class ErrorBanner(QLabel):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWordWrap(True)
        self.setVisible(False)
        
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.dismiss)
        self.update_theme()

    def update_theme(self):
        self.setStyleSheet(get_styles().ERROR_BANNER)

    def show_notice(self, notice: Notice) -> None:
        self._timer.stop()
        self.setText(notice.message)
        self.setVisible(True)
        if notice.timeout_ms > 0:
            self._timer.start(notice.timeout_ms)

    def dismiss(self) -> None:
        self._timer.stop()
        self.clear()
        self.setVisible(False)
