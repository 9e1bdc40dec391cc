import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import photo_sheet
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from photo_sheet.builder.images import SourceImage
from photo_sheet.builder.layout import LayoutConfig


def _encode(img: Image.Image, fmt: str) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


# Common test fixtures
@pytest.fixture
def png_bytes() -> bytes:
    """35x45 aspect RGB PNG."""
    return _encode(Image.new("RGB", (350, 450), color=(200, 120, 40)), "PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _encode(Image.new("RGB", (350, 450), color=(40, 120, 200)), "JPEG")


@pytest.fixture
def gif_bytes() -> bytes:
    return _encode(Image.new("P", (35, 45)), "GIF")


@pytest.fixture
def png_source(png_bytes) -> SourceImage:
    return SourceImage(data=png_bytes, media_type="image/png", name="photo.png")


@pytest.fixture
def jpeg_source(jpeg_bytes) -> SourceImage:
    return SourceImage(data=jpeg_bytes, media_type="image/jpeg", name="photo.jpg")


@pytest.fixture
def gif_source(gif_bytes) -> SourceImage:
    return SourceImage(data=gif_bytes, media_type="image/gif", name="photo.gif")


@pytest.fixture
def sample_image(tmp_path: Path, png_bytes) -> Path:
    """PNG photo written to disk."""
    img_path = tmp_path / "sample.png"
    img_path.write_bytes(png_bytes)
    return img_path


@pytest.fixture
def layout_config() -> LayoutConfig:
    return LayoutConfig()
