"""
Module: builder.output.preview

Purpose:
    Rasterise the first page of a rendered sheet for on-screen preview.

Key Functions:
    - render_preview(): PDF bytes -> PIL Image

Dependencies:
    - fitz (PyMuPDF): PDF rasterisation
    - PIL.Image: Image handling

Used By:
    - gui.main_window: Sheet preview panel
"""

from __future__ import annotations

import logging

import fitz
from PIL import Image

from photo_sheet.common.errors import RenderError

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_DPI = 72


def render_preview(pdf_bytes: bytes, dpi: int = DEFAULT_PREVIEW_DPI) -> Image.Image:
    """
    Render page one of a PDF to an RGB image.
    
    Args:
        pdf_bytes: Document produced by render_sheet()
        dpi: Raster resolution. Defaults to 72.
        
    Returns:
        RGB PIL Image of the page
        
    Raises:
        RenderError: If the bytes are not a readable PDF
    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")
    
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise RenderError(f"Could not open sheet for preview: {e}") from e
    
    try:
        if doc.page_count == 0:
            raise RenderError("Sheet has no pages")
        matrix = fitz.Matrix(dpi / 72.0, dpi / 72.0)
        pix = doc[0].get_pixmap(matrix=matrix, alpha=False)
        image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
    finally:
        doc.close()
    
    logger.debug(f"Preview rendered at {dpi} dpi: {image.width}x{image.height}px")
    return image
