"""
Unit tests for GUI settings persistence.
"""
import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from photo_sheet.gui.models.settings import SettingsStore


class TestSettingsStore(unittest.TestCase):
    """Test settings persistence."""
    
    def setUp(self):
        self.temp_dir = TemporaryDirectory()
        self.settings_path = Path(self.temp_dir.name) / "test_settings.json"
        self.store = SettingsStore(self.settings_path)
    
    def tearDown(self):
        self.temp_dir.cleanup()
    
    def test_output_dir_persistence(self):
        """Test output folder is saved and loaded correctly."""
        self.store.set_output_dir("/home/me/Documents")
        
        # Create new store instance to test persistence
        new_store = SettingsStore(self.settings_path)
        self.assertEqual(new_store.get_output_dir(), "/home/me/Documents")
    
    def test_last_mode_persistence(self):
        self.store.set_last_mode("mixed")
        
        new_store = SettingsStore(self.settings_path)
        self.assertEqual(new_store.get_last_mode(), "mixed")
    
    def test_last_mode_rejects_unknown(self):
        with self.assertRaises(ValueError):
            self.store.set_last_mode("diagonal")
    
    def test_dark_mode_persistence(self):
        self.assertFalse(self.store.get_dark_mode())
        self.store.set_dark_mode(True)
        
        new_store = SettingsStore(self.settings_path)
        self.assertTrue(new_store.get_dark_mode())
    
    def test_defaults_when_no_file(self):
        self.assertIsNone(self.store.get_output_dir())
        self.assertEqual(self.store.get_last_mode(), "uniform")
        self.assertIsNone(self.store.load_error)
    
    def test_invalid_mode_in_file_falls_back(self):
        self.settings_path.write_text(json.dumps({"last_mode": "spiral"}), encoding="utf-8")
        
        store = SettingsStore(self.settings_path)
        self.assertEqual(store.get_last_mode(), "uniform")
    
    def test_corrupted_file_records_error(self):
        """Test corrupted JSON falls back to defaults and reports the error."""
        self.settings_path.write_text("{not json", encoding="utf-8")
        
        store = SettingsStore(self.settings_path)
        
        self.assertIsNotNone(store.load_error)
        self.assertIn("corrupted", store.load_error)
        self.assertEqual(store.get_last_mode(), "uniform")
    
    def test_non_dict_file_treated_as_empty(self):
        self.settings_path.write_text("[1, 2, 3]", encoding="utf-8")
        
        store = SettingsStore(self.settings_path)
        self.assertIsNone(store.get_output_dir())
        self.assertFalse(store.get_dark_mode())
    
    def test_save_leaves_no_temp_file(self):
        self.store.set_dark_mode(True)
        
        self.assertTrue(self.settings_path.exists())
        self.assertFalse(self.settings_path.with_suffix(".tmp").exists())
        data = json.loads(self.settings_path.read_text(encoding="utf-8"))
        self.assertEqual(data["version"], SettingsStore.CURRENT_VERSION)


if __name__ == '__main__':
    unittest.main()
