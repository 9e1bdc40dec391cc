"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .errors import (
    SheetError,
    MissingImageError,
    UnsupportedFormatError,
    RenderError,
    LayoutOverflowError,
    RenderInProgressError,
)

__all__ = [
    "SheetError",
    "MissingImageError",
    "UnsupportedFormatError",
    "RenderError",
    "LayoutOverflowError",
    "RenderInProgressError",
]
