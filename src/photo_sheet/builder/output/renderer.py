"""
Module: builder.output.renderer

Purpose:
    Render a SheetLayout to a one-page PDF using ReportLab.
    The photo is decoded once and the same handle is drawn at every
    placement; ReportLab stores it as a single image XObject.

Key Functions:
    - render_sheet(): Main rendering function, returns PDF bytes

Coordinates:
    Placements are bottom-left origin in layout units. With units="mm"
    each unit is scaled by reportlab.lib.units.mm so the page prints at
    true size. With units="pt" one layout unit is one PDF point, which
    gives the legacy 210x297 point page.

Dependencies:
    - reportlab: PDF generation
    - builder.images: SourceImage, embed_image
    - builder.layout.models: SheetLayout

Used By:
    - builder.controller: Sheet pipeline
"""

from __future__ import annotations

import io
import logging
from typing import Callable

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from photo_sheet.common.errors import RenderError, SheetError
from photo_sheet.builder.images import EmbeddedImage, SourceImage, embed_image
from photo_sheet.builder.layout.models import Placement, SheetLayout

logger = logging.getLogger(__name__)

UNIT_SCALES = {
    "mm": mm,
    "pt": 1.0,
}

DOCUMENT_TITLE = "Passport photos"

Embedder = Callable[[SourceImage], EmbeddedImage]


def unit_scale(units: str) -> float:
    """
    PDF points per layout unit.
    
    Raises:
        ValueError: For units other than "mm" or "pt"
    """
    try:
        return UNIT_SCALES[units]
    except KeyError:
        raise ValueError(f"Unknown units {units!r}, expected one of {sorted(UNIT_SCALES)}") from None


def render_sheet(
    source: SourceImage,
    layout: SheetLayout,
    *,
    units: str = "mm",
    embed: Embedder = embed_image,
) -> bytes:
    """
    Render the photo at every placement and serialize the page.
    
    Nothing is drawn until the photo has been embedded, so a decode or
    format failure never yields a partial document.
    
    Args:
        source: Photo to draw
        layout: Placements computed for the page
        units: "mm" (true size) or "pt" (legacy point units)
        embed: Decoder called once per render
        
    Returns:
        PDF document bytes
        
    Raises:
        UnsupportedFormatError: If the photo's media type is not PNG/JPEG
        RenderError: If decoding, drawing or serialization fails
        
    Example:
        >>> pdf = render_sheet(source, compute_layout(LayoutMode.UNIFORM, LayoutConfig()))
        >>> pdf[:5]
        b'%PDF-'
    """
    scale = unit_scale(units)
    
    try:
        image = embed(source)
    except SheetError:
        raise
    except Exception as e:
        raise RenderError(f"Could not embed image: {e}") from e
    
    page_size = (layout.page.width * scale, layout.page.height * scale)
    buf = io.BytesIO()
    
    try:
        c = canvas.Canvas(buf, pagesize=page_size)
        c.setTitle(DOCUMENT_TITLE)
        c.setSubject(f"{layout.mode.value} sheet, {layout.placement_count} copies")
        
        for placement in layout.placements:
            _draw_placement(c, image, placement, scale)
        
        c.showPage()
        c.save()
    except Exception as e:
        raise RenderError(str(e)) from e
    
    data = buf.getvalue()
    logger.info(
        f"Rendered {layout.placement_count} placements "
        f"({layout.mode.value}) into {len(data)} byte PDF"
    )
    return data


def _draw_placement(
    c: canvas.Canvas,
    image: EmbeddedImage,
    placement: Placement,
    scale: float,
) -> None:
    """Draw the shared image handle stretched to the placement box."""
    c.drawImage(
        image.reader,
        placement.x * scale,
        placement.y * scale,
        width=placement.width * scale,
        height=placement.height * scale,
        mask="auto" if image.has_alpha else None,
    )
    logger.debug(f"Drew {placement.kind.value} at ({placement.x:.2f}, {placement.y:.2f})")
