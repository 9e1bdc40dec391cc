"""
Tests for the sheet pipeline entry points.
"""

import threading

import pytest

from photo_sheet.builder import (
    LayoutMode,
    Notice,
    SheetBuilder,
    SheetConfig,
    SourceImage,
    build_sheet,
    notice_for,
)
from photo_sheet.builder.images import embed_image
from photo_sheet.common.errors import (
    LayoutOverflowError,
    MissingImageError,
    RenderError,
    RenderInProgressError,
    UnsupportedFormatError,
)
from photo_sheet.builder.layout import LayoutConfig, PageSpec


class TestBuildSheet:
    """Tests for build_sheet()."""

    def test_build_when_uniform_then_thirty_passports(self, png_source):
        # Act
        result = build_sheet(png_source, LayoutMode.UNIFORM)

        # Assert
        assert result.document.startswith(b"%PDF-")
        assert result.layout.passport_count == 30
        assert result.layout.stamp_count == 0
        assert result.filename == "passport_photos.pdf"
        assert result.media_type == "application/pdf"
        assert result.size_bytes == len(result.document)

    def test_build_when_mixed_string_then_twenty_plus_ten(self, jpeg_source):
        result = build_sheet(jpeg_source, "mixed")

        assert result.layout.mode is LayoutMode.MIXED
        assert result.layout.passport_count == 20
        assert result.layout.stamp_count == 10

    def test_build_when_no_image_then_raises_missing(self):
        with pytest.raises(MissingImageError):
            build_sheet(None, LayoutMode.UNIFORM)

    def test_build_when_no_image_then_embed_not_called(self):
        calls = []

        with pytest.raises(MissingImageError):
            build_sheet(None, LayoutMode.MIXED, embed=lambda s: calls.append(s))

        assert calls == []

    def test_build_when_gif_then_raises_unsupported(self, gif_source):
        with pytest.raises(UnsupportedFormatError):
            build_sheet(gif_source, LayoutMode.UNIFORM)

    def test_build_when_declared_type_mismatches_bytes_then_raises_render_error(self, gif_bytes):
        source = SourceImage(data=gif_bytes, media_type="image/png")

        with pytest.raises(RenderError):
            build_sheet(source, LayoutMode.UNIFORM)

    def test_build_when_unknown_mode_then_raises(self, png_source):
        with pytest.raises(ValueError):
            build_sheet(png_source, "diagonal")

    def test_build_when_grid_overflows_then_raises(self, png_source):
        config = SheetConfig(layout=LayoutConfig(page=PageSpec(150, 297)))

        with pytest.raises(LayoutOverflowError):
            build_sheet(png_source, LayoutMode.UNIFORM, config)

    def test_build_when_pt_units_then_renders(self, png_source):
        result = build_sheet(png_source, LayoutMode.UNIFORM, SheetConfig(units="pt"))
        assert result.document.startswith(b"%PDF-")

    def test_save_when_called_then_written_without_overwrite(self, png_source, tmp_path):
        # Arrange
        result = build_sheet(png_source, LayoutMode.UNIFORM)

        # Act
        first = result.save(tmp_path)
        second = result.save(tmp_path)

        # Assert
        assert first.name == "passport_photos.pdf"
        assert second.name == "passport_photos (1).pdf"
        assert first.read_bytes() == result.document


class TestSheetBuilder:
    """Tests for SheetBuilder concurrency guard."""

    def test_build_when_idle_then_renders(self, png_source):
        builder = SheetBuilder()

        result = builder.build(png_source, LayoutMode.MIXED)

        assert result.layout.placement_count == 30
        assert builder.busy is False

    def test_build_when_render_running_then_rejects_second(self, png_source):
        # Arrange
        entered = threading.Event()
        release = threading.Event()

        def slow_embed(source):
            entered.set()
            release.wait(timeout=10)
            return embed_image(source)

        builder = SheetBuilder(embed=slow_embed)
        results = []
        worker = threading.Thread(
            target=lambda: results.append(builder.build(png_source, LayoutMode.UNIFORM))
        )

        # Act
        worker.start()
        assert entered.wait(timeout=10)
        try:
            assert builder.busy is True
            with pytest.raises(RenderInProgressError):
                builder.build(png_source, LayoutMode.MIXED)
        finally:
            release.set()
            worker.join(timeout=10)

        # Assert
        assert len(results) == 1
        assert builder.busy is False

    def test_build_when_previous_failed_then_lock_released(self, png_source):
        builder = SheetBuilder()

        with pytest.raises(MissingImageError):
            builder.build(None, LayoutMode.UNIFORM)

        assert builder.build(png_source, LayoutMode.UNIFORM).document

    def test_notice_when_configured_then_uses_timeout(self):
        builder = SheetBuilder(SheetConfig(notice_timeout_ms=1500))

        notice = builder.notice(MissingImageError())

        assert notice.timeout_ms == 1500


class TestNoticeFor:
    def test_notice_when_missing_image_then_prompt(self):
        notice = notice_for(MissingImageError())

        assert notice == Notice(
            message="Please select an image before generating the PDF.",
            level="error",
            timeout_ms=5000,
        )

    def test_notice_when_render_error_then_prefixed(self):
        notice = notice_for(RenderError("bad bytes"))
        assert notice.message == "Error generating PDF: bad bytes"

    def test_notice_when_unsupported_then_names_format(self):
        notice = notice_for(UnsupportedFormatError("image/gif"))
        assert "image/gif" in notice.message

    def test_notice_when_unexpected_exception_then_prefixed(self):
        notice = notice_for(KeyError("x"))
        assert notice.message.startswith("Error generating PDF:")
