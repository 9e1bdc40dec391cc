"""
Module: common.errors

Purpose:
    Failure conditions raised by the sheet pipeline. Every condition is
    user-correctable: the GUI shows ``user_message`` and stays interactive.

Key Classes:
    - SheetError: Base class for all pipeline failures
    - MissingImageError: Render requested with no photo loaded
    - UnsupportedFormatError: Declared media type is not PNG/JPEG
    - RenderError: Decode, embed or serialize step failed
    - LayoutOverflowError: A placement falls outside the page
    - RenderInProgressError: A render is already running

Used By:
    - builder.layout.grid: LayoutOverflowError
    - builder.images: MissingImageError, UnsupportedFormatError
    - builder.output.renderer: RenderError
    - builder.controller: RenderInProgressError, notice conversion
"""

from __future__ import annotations

from typing import Any, Optional


class SheetError(Exception):
    """Base error for the sheet pipeline."""

    default_message = "Could not generate the photo sheet."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        """Human-readable text for the notification banner."""
        return str(self)


class MissingImageError(SheetError):
    """No image loaded before a render was triggered."""

    default_message = "Please select an image before generating the PDF."


class UnsupportedFormatError(SheetError):
    """Declared media subtype outside png/jpeg/jpg."""

    def __init__(self, media_type: str) -> None:
        self.media_type = media_type
        super().__init__(f"Unsupported image format: {media_type!r}. Use a PNG or JPEG photo.")


class RenderError(SheetError):
    """Lower-level decode/embed/serialize failure (wraps the cause)."""

    @property
    def user_message(self) -> str:
        return f"Error generating PDF: {self}"


class LayoutOverflowError(SheetError):
    """A computed placement does not fit inside the page."""

    def __init__(self, message: str, placement: Any = None) -> None:
        self.placement = placement
        super().__init__(message)


class RenderInProgressError(SheetError):
    """A render call is already running."""

    default_message = "A sheet is already being generated. Please wait."
