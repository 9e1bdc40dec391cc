"""
Activity console showing pipeline logs and save/load events.
"""
from datetime import datetime
from typing import Dict

from PySide6.QtWidgets import (
    QGroupBox, QVBoxLayout, QPlainTextEdit, QMenu, QApplication, QSizePolicy
)
from PySide6.QtGui import QFont, QColor, QTextCharFormat, QTextCursor
from PySide6.QtCore import Slot

from photo_sheet.gui.styles.theme import Fonts, get_colors

MAX_LINES = 1000

# Level name -> Colors attribute
LEVEL_COLORS = {
    "ERROR": "ERROR",
    "CRITICAL": "ERROR",
    "WARNING": "WARNING",
    "SUCCESS": "SUCCESS",
    "INFO": "TEXT_PRIMARY",
    "DEBUG": "TEXT_SECONDARY",
}


class ConsoleWidget(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Activity", parent)
        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        
        box = QVBoxLayout(self)
        box.setContentsMargins(0, 0, 0, 0)
        
        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        # Oldest lines drop off automatically
        self.text_edit.setMaximumBlockCount(MAX_LINES)
        font = QFont(Fonts.MONO_FONT.split(",")[0])
        font.setPointSize(int(Fonts.CONSOLE.rstrip("pt")))
        self.text_edit.setFont(font)
        box.addWidget(self.text_edit)
        
        self._formats: Dict[str, QTextCharFormat] = {}
        self.update_theme()

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        """Append one line, coloured by level."""
        level = level.upper()
        if level == "WARN":
            level = "WARNING"
        fmt = self._formats.get(level, self._formats["INFO"])
        
        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        stamp = datetime.now().strftime("%H:%M:%S")
        cursor.insertText(f"{stamp}  {level:<8} {message}\n", fmt)
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_action = menu.addAction("Copy Log")
        clear_action = menu.addAction("Clear")
        chosen = menu.exec(event.globalPos())
        if chosen == copy_action:
            QApplication.clipboard().setText(self.text_edit.toPlainText())
        elif chosen == clear_action:
            self.clear()

    def clear(self):
        self.text_edit.clear()

    def update_theme(self):
        C = get_colors()
        self.setStyleSheet(f"""
            QGroupBox {{
                background-color: {C.SURFACE};
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                margin-top: 20px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                color: {C.TEXT_SECONDARY};
            }}
            QPlainTextEdit {{
                border: none;
                background-color: {C.SURFACE};
            }}
        """)
        for level, attr in LEVEL_COLORS.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(getattr(C, attr)))
            self._formats[level] = fmt
