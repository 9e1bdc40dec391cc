"""
Tests for reading the package version from pyproject.toml.
"""

from photo_sheet import _read_pyproject_version, __version__


class TestReadPyprojectVersion:
    def test_read_when_project_version_then_returned(self, tmp_path):
        # Arrange
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "photo-sheet"\nversion = "1.2.3"\n', encoding="utf-8")
        
        # Act / Assert
        assert _read_pyproject_version(path) == "1.2.3"

    def test_read_when_similar_keys_then_ignored(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[tool.versioning]\nversion = "9.9.9"\n'
            '[project]\nversion_scheme = "calver"\nversion = "0.4.0"  # release\n',
            encoding="utf-8",
        )
        
        assert _read_pyproject_version(path) == "0.4.0"

    def test_read_when_no_version_then_none(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "photo-sheet"\n', encoding="utf-8")
        
        assert _read_pyproject_version(path) is None

    def test_read_when_missing_file_then_none(self, tmp_path):
        assert _read_pyproject_version(tmp_path / "missing.toml") is None

    def test_package_version_matches_pyproject(self):
        assert __version__ == "0.3.0"
