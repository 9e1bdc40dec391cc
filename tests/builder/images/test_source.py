"""
Unit tests for SourceImage intake and media type parsing.
"""

import base64

import pytest

from photo_sheet.builder.images import (
    ImageEncoding,
    SourceImage,
    parse_media_type,
    require_image,
)
from photo_sheet.common.errors import MissingImageError, UnsupportedFormatError


class TestParseMediaType:
    """Tests for parse_media_type()."""

    @pytest.mark.parametrize("media_type, expected", [
        ("image/png", ImageEncoding.PNG),
        ("image/jpeg", ImageEncoding.JPEG),
        ("image/jpg", ImageEncoding.JPEG),
        ("IMAGE/PNG", ImageEncoding.PNG),
        ("image/jpeg;base64", ImageEncoding.JPEG),
    ])
    def test_parse_when_supported_then_encoding(self, media_type, expected):
        assert parse_media_type(media_type) is expected

    @pytest.mark.parametrize("media_type", [
        "image/gif",
        "image/webp",
        "application/pdf",
        "png",
        "",
    ])
    def test_parse_when_unsupported_then_raises(self, media_type):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            parse_media_type(media_type)
        assert exc_info.value.media_type == media_type


class TestSourceImage:
    """Tests for SourceImage construction."""

    def test_encoding_when_declared_jpeg_then_trusts_declaration(self, png_bytes):
        """Bytes are never sniffed; the declared type wins."""
        source = SourceImage(data=png_bytes, media_type="image/jpeg")
        assert source.encoding is ImageEncoding.JPEG

    def test_from_path_when_png_then_media_type_from_extension(self, sample_image, png_bytes):
        # Act
        source = SourceImage.from_path(sample_image)
        
        # Assert
        assert source.media_type == "image/png"
        assert source.name == "sample.png"
        assert source.data == png_bytes
        assert source.size_bytes == len(png_bytes)

    def test_from_path_when_jpg_extension_then_jpeg(self, tmp_path, jpeg_bytes):
        path = tmp_path / "me.jpg"
        path.write_bytes(jpeg_bytes)
        
        assert SourceImage.from_path(path).encoding is ImageEncoding.JPEG

    def test_from_path_when_unknown_extension_then_octet_stream(self, tmp_path):
        path = tmp_path / "photo.unknownext"
        path.write_bytes(b"data")
        
        source = SourceImage.from_path(path)
        
        assert source.media_type == "application/octet-stream"
        with pytest.raises(UnsupportedFormatError):
            source.encoding

    def test_from_path_when_missing_then_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            SourceImage.from_path(tmp_path / "missing.png")

    def test_from_data_url_when_base64_png_then_decoded(self, png_bytes):
        # Arrange
        url = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
        
        # Act
        source = SourceImage.from_data_url(url)
        
        # Assert
        assert source.media_type == "image/png"
        assert source.data == png_bytes

    def test_from_data_url_when_gif_then_keeps_declared_type(self, gif_bytes):
        url = "data:image/gif;base64," + base64.b64encode(gif_bytes).decode()
        
        source = SourceImage.from_data_url(url)
        
        with pytest.raises(UnsupportedFormatError):
            source.encoding

    def test_from_data_url_when_not_data_url_then_raises(self):
        with pytest.raises(ValueError, match="Not a data URL"):
            SourceImage.from_data_url("https://example.com/a.png")

    def test_from_data_url_when_not_base64_then_raises(self):
        with pytest.raises(ValueError, match="base64"):
            SourceImage.from_data_url("data:image/png,rawdata")

    def test_from_data_url_when_bad_payload_then_raises(self):
        with pytest.raises(ValueError, match="Invalid base64"):
            SourceImage.from_data_url("data:image/png;base64,@@@")


class TestRequireImage:
    def test_require_when_none_then_raises_missing(self):
        with pytest.raises(MissingImageError, match="Please select an image"):
            require_image(None)

    def test_require_when_empty_bytes_then_raises_missing(self):
        with pytest.raises(MissingImageError):
            require_image(SourceImage(data=b"", media_type="image/png"))

    def test_require_when_loaded_then_returns_source(self, png_source):
        assert require_image(png_source) is png_source
