"""
Module: builder.images.embedder

Purpose:
    Decode a SourceImage once and wrap it for ReportLab drawing.
    This is the expensive step of a render; the renderer calls it exactly
    once per document and reuses the result for every placement.

Key Functions:
    - embed_image(): SourceImage -> EmbeddedImage

Key Classes:
    - EmbeddedImage: Decoded image handle shared by all draws

Dependencies:
    - PIL: Decoding
    - reportlab: ImageReader

Used By:
    - builder.output.renderer: Document rendering
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError
from reportlab.lib.utils import ImageReader

from photo_sheet.common.errors import RenderError

from .source import ImageEncoding, SourceImage

logger = logging.getLogger(__name__)

# Modes ReportLab embeds without a conversion pass
_DIRECT_MODES = {"RGB", "RGBA", "L", "CMYK"}


@dataclass(frozen=True)
class EmbeddedImage:
    """
    Decoded photo ready to draw.
    
    Attributes:
        reader: ReportLab image handle
        encoding: Declared encoding
        width_px: Pixel width
        height_px: Pixel height
        has_alpha: Whether a transparency mask is drawn
    """
    reader: ImageReader
    encoding: ImageEncoding
    width_px: int
    height_px: int
    has_alpha: bool = False
    
    @property
    def aspect_ratio(self) -> float:
        return self.width_px / self.height_px


def embed_image(source: SourceImage) -> EmbeddedImage:
    """
    Decode the photo and build an ImageReader.
    
    Args:
        source: Photo with a png/jpeg/jpg media type
        
    Returns:
        EmbeddedImage handle
        
    Raises:
        UnsupportedFormatError: If the declared media type is not supported
        RenderError: If the bytes are not a decodable image of the declared encoding
    """
    encoding = source.encoding
    
    try:
        img = Image.open(io.BytesIO(source.data), formats=[encoding.name])
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise RenderError(f"Could not decode {encoding.value.upper()} image: {e}") from e
    
    if img.mode == "P":
        img = img.convert("RGBA" if "transparency" in img.info else "RGB")
    elif img.mode not in _DIRECT_MODES:
        img = img.convert("RGB")
    
    embedded = EmbeddedImage(
        reader=ImageReader(img),
        encoding=encoding,
        width_px=img.width,
        height_px=img.height,
        has_alpha=img.mode == "RGBA",
    )
    logger.info(f"Embedded {source.name} ({encoding.value}, {img.width}x{img.height}px)")
    return embedded
