"""
Preview of the loaded photo repeated in the sheet grid.
"""
from typing import List, Optional

from PySide6.QtWidgets import QWidget, QGridLayout, QLabel, QPushButton, QVBoxLayout, QHBoxLayout
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPixmap

from photo_sheet.builder.images import SourceImage
from photo_sheet.builder.layout import LayoutConfig
from photo_sheet.gui.styles.theme import get_styles

# Screen pixels per millimetre at 96 dpi
PX_PER_MM = 3.7795
# Thumbnails are drawn at this fraction of true size
THUMB_SCALE = 0.5


class PreviewGrid(QWidget):
    """columns x rows thumbnails of the photo with a clear button."""
    
    cleared = Signal()

    def __init__(self, config: Optional[LayoutConfig] = None, parent=None):
        super().__init__(parent)
        self.config = config or LayoutConfig()
        self._cells: List[QLabel] = []
        self.has_image = False
        
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        
        header = QHBoxLayout()
        header.addStretch()
        self.clear_btn = QPushButton("✕")
        self.clear_btn.setFixedSize(30, 30)
        self.clear_btn.setToolTip("Remove preview")
        self.clear_btn.clicked.connect(self.clear)
        header.addWidget(self.clear_btn)
        outer.addLayout(header)
        
        grid_host = QWidget()
        self.grid = QGridLayout(grid_host)
        self.grid.setSpacing(10)
        self.grid.setAlignment(Qt.AlignmentFlag.AlignCenter)
        outer.addWidget(grid_host)
        
        w = int(self.config.passport.width * PX_PER_MM * THUMB_SCALE)
        h = int(self.config.passport.height * PX_PER_MM * THUMB_SCALE)
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                cell = QLabel()
                cell.setFixedSize(w, h)
                cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
                self.grid.addWidget(cell, row, col)
                self._cells.append(cell)
        
        self.update_theme()
        self.setVisible(False)

    def update_theme(self):
        self.clear_btn.setStyleSheet(get_styles().BUTTON_CLEAR)

    def set_image(self, source: SourceImage) -> bool:
        """Show the photo in every cell. Returns False if Qt cannot decode it."""
        pixmap = QPixmap()
        if not pixmap.loadFromData(source.data):
            self._reset_cells()
            return False
        for cell in self._cells:
            cell.setPixmap(pixmap.scaled(
                cell.size(),
                Qt.AspectRatioMode.KeepAspectRatioByExpanding,
                Qt.TransformationMode.SmoothTransformation,
            ))
        self.has_image = True
        self.setVisible(True)
        return True

    def clear(self):
        """Discard the photo. Emits cleared if one was showing."""
        had_image = self.has_image
        self._reset_cells()
        if had_image:
            self.cleared.emit()

    def _reset_cells(self):
        for cell in self._cells:
            cell.clear()
        self.has_image = False
        self.setVisible(False)
