"""
Module: builder.output

Purpose:
    PDF rendering and output for the sheet builder.

Key Functions:
    - render_sheet(): Render a layout to PDF bytes
    - write_document(): Save bytes as passport_photos.pdf
    - render_preview(): Rasterise a sheet for display

Dependencies:
    - reportlab: PDF generation
    - fitz (PyMuPDF): Preview rasterisation
"""

from .renderer import render_sheet, unit_scale, UNIT_SCALES
from .writer import write_document, unique_path, DEFAULT_FILENAME, PDF_MEDIA_TYPE
from .preview import render_preview

__all__ = [
    "render_sheet",
    "unit_scale",
    "UNIT_SCALES",
    "write_document",
    "unique_path",
    "DEFAULT_FILENAME",
    "PDF_MEDIA_TYPE",
    "render_preview",
]
