"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (Documents, AppData)
"""
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "Passport Photo Sheet"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for internal state files.
    
    Frozen: Qt AppLocalDataLocation
    Dev: workspace/
    """
    if is_frozen():
        app_data = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        ))
    else:
        app_data = Path.cwd() / "workspace"
    app_data.mkdir(parents=True, exist_ok=True)
    return app_data


def get_settings_path() -> Path:
    """Path of the GUI settings JSON file."""
    return get_app_data_dir() / "settings.json"


def get_default_output_dir() -> Path:
    """
    Default folder offered when saving a sheet.
    
    Frozen: ~/Documents/Passport Photo Sheet
    Dev: workspace/output
    """
    if is_frozen():
        docs = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.DocumentsLocation
        ))
        return docs / APP_NAME
    return Path.cwd() / "workspace" / "output"
