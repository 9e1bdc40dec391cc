"""
GUI preferences persisted as JSON.

Only window preferences live here: theme, the folder sheets were last
saved to and the last layout mode. Photos and generated sheets are never
written to the settings file. Unreadable or malformed values fall back to
defaults.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

VALID_MODES = ("uniform", "mixed")

DEFAULTS: Dict[str, Any] = {
    "output_dir": None,
    "last_mode": "uniform",
    "dark_mode": False,
}


class SettingsStore:
    """JSON-backed preference store, saved on every change."""

    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.data: Dict[str, Any] = {}
        self._load_error: Optional[str] = None
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            self.data = {"version": self.CURRENT_VERSION}
            return
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            self._load_error = f"Settings file is corrupted:\n{e}"
            loaded = {}
        except OSError as e:
            self._load_error = f"Failed to read settings:\n{e}"
            loaded = {}
        if not isinstance(loaded, dict):
            logger.warning(f"Ignoring settings of type {type(loaded).__name__}")
            loaded = {}
        loaded.setdefault("version", self.CURRENT_VERSION)
        self.data = loaded

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Offer to reset settings if the file could not be loaded.

        Needs a running QApplication. Returns False if the user chose to quit.
        """
        if not self._load_error:
            return True

        from PySide6.QtWidgets import QMessageBox

        answer = QMessageBox.warning(
            None,
            "Settings Error",
            f"{self._load_error}\n\nReset preferences to defaults and continue?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        if answer != QMessageBox.StandardButton.Yes:
            return False
        self.reset()
        return True

    def reset(self) -> None:
        """Drop all preferences and rewrite the file."""
        self.data = {"version": self.CURRENT_VERSION}
        self._load_error = None
        self._save()

    # --- Preferences ---

    def get_output_dir(self) -> Optional[str]:
        value = self._get("output_dir")
        return value if isinstance(value, str) and value else None

    def set_output_dir(self, value: str) -> None:
        self._set("output_dir", value)

    def get_last_mode(self) -> str:
        """Last layout mode used ("uniform" when missing or invalid)."""
        mode = self._get("last_mode")
        return mode if mode in VALID_MODES else DEFAULTS["last_mode"]

    def set_last_mode(self, mode: str) -> None:
        if mode not in VALID_MODES:
            raise ValueError(f"Unknown layout mode: {mode!r}")
        self._set("last_mode", mode)

    def get_dark_mode(self) -> bool:
        ui = self.data.get("ui")
        if not isinstance(ui, dict):
            return DEFAULTS["dark_mode"]
        return bool(ui.get("dark_mode", DEFAULTS["dark_mode"]))

    def set_dark_mode(self, enabled: bool) -> None:
        ui = self.data.get("ui")
        if not isinstance(ui, dict):
            ui = self.data["ui"] = {}
        ui["dark_mode"] = bool(enabled)
        self._save()

    def _get(self, key: str) -> Any:
        return self.data.get(key, DEFAULTS[key])

    def _set(self, key: str, value: Any) -> None:
        self.data[key] = value
        self._save()

    def _save(self) -> None:
        """Write via a temp file so an interrupted save keeps the old file."""
        temp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            temp_path.unlink(missing_ok=True)
