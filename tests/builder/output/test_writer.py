"""
Unit tests for saving sheets to disk.
"""

from photo_sheet.builder.output import DEFAULT_FILENAME, unique_path, write_document


class TestUniquePath:
    def test_unique_when_free_then_plain_name(self, tmp_path):
        assert unique_path(tmp_path) == tmp_path / DEFAULT_FILENAME

    def test_unique_when_taken_then_numbered(self, tmp_path):
        # Arrange
        (tmp_path / "passport_photos.pdf").write_bytes(b"a")
        (tmp_path / "passport_photos (1).pdf").write_bytes(b"b")

        # Act
        path = unique_path(tmp_path)

        # Assert
        assert path.name == "passport_photos (2).pdf"


class TestWriteDocument:
    def test_write_when_called_then_bytes_on_disk(self, tmp_path):
        path = write_document(b"%PDF-1.4 test", tmp_path)

        assert path.name == "passport_photos.pdf"
        assert path.read_bytes() == b"%PDF-1.4 test"

    def test_write_when_dir_missing_then_created(self, tmp_path):
        target = tmp_path / "nested" / "out"

        path = write_document(b"data", target, "sheet.pdf")

        assert path == target / "sheet.pdf"
        assert path.exists()

    def test_write_when_existing_then_never_overwrites(self, tmp_path):
        first = write_document(b"first", tmp_path)
        second = write_document(b"second", tmp_path)

        assert first != second
        assert first.read_bytes() == b"first"
        assert second.read_bytes() == b"second"
