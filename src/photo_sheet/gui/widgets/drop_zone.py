"""
Drag & drop area for loading the photo.

Accepts a dropped image file or opens a file dialog when clicked.
"""
import logging
from pathlib import Path

from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QFileDialog
from PySide6.QtCore import Qt, Signal

from photo_sheet.builder.images import SourceImage
from photo_sheet.gui.styles.theme import get_styles

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp);;All Files (*)"


class DropZone(QFrame):
    """Dashed drop target emitting the loaded SourceImage."""
    
    # SourceImage
    imageSelected = Signal(object)
    # error message
    loadFailed = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("DropZone")
        self.setAcceptDrops(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(90)
        self.setProperty("dragActive", False)
        
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        self.label = QLabel("Drag & drop a photo here, or click to select one")
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.label)
        
        self.update_theme()

    def update_theme(self):
        self.setStyleSheet(get_styles().DROP_ZONE)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            filename, _ = QFileDialog.getOpenFileName(self, "Select Photo", "", IMAGE_FILTER)
            if filename:
                self.load_path(Path(filename))
        super().mousePressEvent(event)

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
            self._set_drag_active(True)

    def dragLeaveEvent(self, event):
        self._set_drag_active(False)

    def dropEvent(self, event):
        self._set_drag_active(False)
        urls = [u for u in event.mimeData().urls() if u.isLocalFile()]
        if not urls:
            return
        # First file only
        self.load_path(Path(urls[0].toLocalFile()))
        event.acceptProposedAction()

    def load_path(self, path: Path) -> None:
        try:
            source = SourceImage.from_path(path)
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            self.loadFailed.emit(f"Could not read {path.name}: {e}")
            return
        logger.info(f"Loaded {source.name} ({source.media_type}, {source.size_bytes} bytes)")
        self.imageSelected.emit(source)

    def _set_drag_active(self, active: bool) -> None:
        self.setProperty("dragActive", active)
        self.style().unpolish(self)
        self.style().polish(self)
