"""
Entry point for the PySide6 GUI.
"""
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from photo_sheet.gui.main_window import MainWindow, APP_TITLE
    from photo_sheet.gui.models.settings import SettingsStore
    from photo_sheet.gui.styles.theme import apply_theme
    from photo_sheet.gui.utils.paths import get_settings_path
    
    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    app.setApplicationDisplayName(APP_TITLE)
    app.setOrganizationName(APP_TITLE)
    
    settings = SettingsStore(get_settings_path())
    
    # Check for malformed settings and prompt user to reset if needed
    if not settings.check_load_error():
        sys.exit(1)
    
    apply_theme(app, settings.get_dark_mode())
    
    window = MainWindow(settings=settings)
    window.show()
    
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
