"""
Main Window for the Passport Photo Sheet GUI.
"""
import io
import logging
import queue
import threading
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QTabWidget,
    QPushButton, QLabel, QFileDialog, QMessageBox, QApplication, QScrollArea
)
from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QAction, QPixmap

from photo_sheet import __version__
from photo_sheet.builder import SheetBuilder, SheetConfig, SheetResult, LayoutMode, SourceImage
from photo_sheet.builder.controller import Notice
from photo_sheet.builder.output import render_preview, unique_path, write_document
from photo_sheet.builder.images import parse_media_type
from photo_sheet.common.errors import RenderInProgressError, SheetError, UnsupportedFormatError
from photo_sheet.gui.models.settings import SettingsStore
from photo_sheet.gui.styles.theme import Fonts, apply_theme, get_styles
from photo_sheet.gui.utils.logging_utils import captured_pipeline_logs
from photo_sheet.gui.utils.paths import get_default_output_dir, get_settings_path
from photo_sheet.gui.widgets.console_widget import ConsoleWidget
from photo_sheet.gui.widgets.drop_zone import DropZone, IMAGE_FILTER
from photo_sheet.gui.widgets.error_banner import ErrorBanner
from photo_sheet.gui.widgets.preview_grid import PreviewGrid

logger = logging.getLogger(__name__)

APP_TITLE = "Passport Photo Generator"


class MainWindow(QMainWindow):
    # Signal to communicate from worker thread to main thread
    # result, error
    generation_finished = Signal(object, object)

    def __init__(self, settings: Optional[SettingsStore] = None, config: Optional[SheetConfig] = None):
        super().__init__()
        self.settings = settings or SettingsStore(get_settings_path())
        self.builder = SheetBuilder(config)
        self.source: Optional[SourceImage] = None
        self.last_result: Optional[SheetResult] = None
        
        self.setWindowTitle(APP_TITLE)
        self.resize(1000, 860)
        
        self._build_menu()
        
        # Initialize Logging
        self.log_queue = queue.Queue()
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)
        
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 12)
        layout.setSpacing(16)
        
        title = QLabel(APP_TITLE)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet(f"font-size: {Fonts.H1}; font-weight: {Fonts.WEIGHT_BOLD};")
        layout.addWidget(title)
        
        self.drop_zone = DropZone()
        self.drop_zone.imageSelected.connect(self._on_image_selected)
        self.drop_zone.loadFailed.connect(lambda msg: self.banner.show_notice(self._notice(msg)))
        layout.addWidget(self.drop_zone)
        
        # Action buttons
        button_row = QHBoxLayout()
        button_row.addStretch()
        self.uniform_btn = QPushButton(LayoutMode.UNIFORM.label)
        self.uniform_btn.clicked.connect(lambda: self.generate(LayoutMode.UNIFORM))
        button_row.addWidget(self.uniform_btn)
        self.mixed_btn = QPushButton(LayoutMode.MIXED.label)
        self.mixed_btn.clicked.connect(lambda: self.generate(LayoutMode.MIXED))
        button_row.addWidget(self.mixed_btn)
        button_row.addStretch()
        layout.addLayout(button_row)
        
        # Last mode used gets keyboard focus and the Generate Again action
        self.preferred_mode = LayoutMode(self.settings.get_last_mode())
        self.mode_button(self.preferred_mode).setFocus()
        
        self.banner = ErrorBanner()
        layout.addWidget(self.banner)
        
        # Preview tabs + console
        splitter = QSplitter(Qt.Orientation.Vertical)
        self.tabs = QTabWidget()
        
        self.preview_grid = PreviewGrid(self.builder.config.layout)
        self.preview_grid.cleared.connect(self._on_image_cleared)
        grid_scroll = QScrollArea()
        grid_scroll.setWidgetResizable(True)
        grid_scroll.setWidget(self.preview_grid)
        self.tabs.addTab(grid_scroll, "Photos")
        
        self.sheet_label = QLabel("Generate a sheet to preview it here.")
        self.sheet_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        sheet_scroll = QScrollArea()
        sheet_scroll.setWidgetResizable(True)
        sheet_scroll.setWidget(self.sheet_label)
        self.tabs.addTab(sheet_scroll, "Sheet")
        
        splitter.addWidget(self.tabs)
        self.console = ConsoleWidget()
        splitter.addWidget(self.console)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter, stretch=1)
        
        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready")
        
        self.generation_finished.connect(self._on_generation_finished)
        self._apply_button_styles()

    def _build_menu(self):
        file_menu = self.menuBar().addMenu("File")
        open_action = QAction("Open Photo...", self)
        open_action.triggered.connect(self._open_photo)
        file_menu.addAction(open_action)
        
        self.save_action = QAction("Save Last Sheet...", self)
        self.save_action.setEnabled(False)
        self.save_action.triggered.connect(lambda: self._save_result(self.last_result))
        file_menu.addAction(self.save_action)
        
        generate_again_action = QAction("Generate Again", self)
        generate_again_action.setShortcut("Ctrl+G")
        generate_again_action.triggered.connect(lambda: self.generate(self.preferred_mode))
        file_menu.addAction(generate_again_action)
        
        file_menu.addSeparator()
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)
        
        settings_menu = self.menuBar().addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(self.settings.get_dark_mode())
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        settings_menu.addAction(self.dark_mode_action)
        
        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    # --- Intake ---

    def _open_photo(self):
        filename, _ = QFileDialog.getOpenFileName(self, "Select Photo", "", IMAGE_FILTER)
        if filename:
            self.drop_zone.load_path(Path(filename))

    def _on_image_selected(self, source: SourceImage):
        self.source = source
        self.banner.dismiss()
        try:
            parse_media_type(source.media_type)
        except UnsupportedFormatError as e:
            self.console.append_log("WARNING", e.user_message)
        if not self.preview_grid.set_image(source):
            self.console.append_log("WARNING", f"Could not preview {source.name}")
        self.tabs.setCurrentIndex(0)
        self.status_bar.showMessage(f"Loaded {source.name}")

    def _on_image_cleared(self):
        self.source = None
        self.status_bar.showMessage("Preview cleared")

    # --- Generation ---

    def generate(self, mode: LayoutMode):
        """Run one render in a worker thread with the action buttons disabled."""
        if self.builder.busy:
            self.banner.show_notice(self.builder.notice(RenderInProgressError()))
            return
        
        self.set_ui_locked(True)
        self.status_bar.showMessage(f"Generating {mode.label}...")
        QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
        source = self.source
        
        def run_generation():
            result = None
            error: Optional[BaseException] = None
            try:
                with captured_pipeline_logs(self.log_queue):
                    result = self.builder.build(source, mode)
            except SheetError as e:
                error = e
            except Exception as e:
                logger.exception("Unexpected error generating sheet")
                error = e
            finally:
                # Always emit signal to finish generation on main thread
                self.generation_finished.emit(result, error)
        
        thread = threading.Thread(target=run_generation, daemon=True)
        thread.start()

    def _on_generation_finished(self, result: Optional[SheetResult], error: Optional[BaseException]):
        QApplication.restoreOverrideCursor()
        self.set_ui_locked(False)
        
        if error is not None:
            notice = self.builder.notice(error)
            self.banner.show_notice(notice)
            self.console.append_log("ERROR", notice.message)
            self.status_bar.showMessage("Generation failed")
            return
        
        self.last_result = result
        self.save_action.setEnabled(True)
        self.preferred_mode = result.layout.mode
        self.settings.set_last_mode(result.layout.mode.value)
        self.console.append_log(
            "SUCCESS",
            f"Generated {result.layout.placement_count} copies in {result.elapsed:.2f}s",
        )
        self._show_sheet_preview(result)
        self._save_result(result)

    def _show_sheet_preview(self, result: SheetResult):
        try:
            image = render_preview(result.document)
        except SheetError as e:
            self.console.append_log("WARNING", e.user_message)
            return
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        pixmap = QPixmap()
        pixmap.loadFromData(buf.getvalue())
        self.sheet_label.setPixmap(pixmap)
        self.tabs.setCurrentIndex(1)

    def _save_result(self, result: Optional[SheetResult]):
        if result is None:
            return
        base_dir = Path(self.settings.get_output_dir() or get_default_output_dir())
        suggested = unique_path(base_dir, result.filename)
        filename, _ = QFileDialog.getSaveFileName(
            self, "Save Sheet", str(suggested), "PDF Files (*.pdf)"
        )
        if not filename:
            return
        chosen = Path(filename)
        try:
            path = write_document(result.document, chosen.parent, chosen.name)
        except OSError as e:
            self.banner.show_notice(self._notice(f"Could not save {chosen.name}: {e}"))
            return
        self.settings.set_output_dir(str(path.parent))
        self.console.append_log("SUCCESS", f"Saved {path}")
        self.status_bar.showMessage(f"Saved {path.name}")

    def mode_button(self, mode: LayoutMode) -> QPushButton:
        return self.mixed_btn if mode is LayoutMode.MIXED else self.uniform_btn

    def set_ui_locked(self, locked: bool):
        self.uniform_btn.setEnabled(not locked)
        self.mixed_btn.setEnabled(not locked)
        self.drop_zone.setEnabled(not locked)

    # --- Misc ---

    def _notice(self, message: str) -> Notice:
        return Notice(message=message, timeout_ms=self.builder.config.notice_timeout_ms)

    def _drain_log_queue(self):
        while True:
            try:
                message, level = self.log_queue.get_nowait()
            except queue.Empty:
                break
            self.console.append_log(level, message)

    def _apply_button_styles(self):
        styles = get_styles()
        self.uniform_btn.setStyleSheet(styles.BUTTON_PRIMARY)
        self.mixed_btn.setStyleSheet(styles.BUTTON_SUCCESS)

    def _toggle_theme(self, checked: bool):
        self.settings.set_dark_mode(checked)
        apply_theme(QApplication.instance(), checked)
        self._apply_button_styles()
        for widget in (self.drop_zone, self.preview_grid, self.banner, self.console):
            widget.update_theme()

    def _show_about(self):
        QMessageBox.about(
            self,
            "About",
            f"{APP_TITLE} v{__version__}\n\n"
            "Prints one photo as a sheet of passport and stamp sized copies.",
        )
