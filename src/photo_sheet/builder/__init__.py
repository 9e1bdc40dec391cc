"""
Module: builder

Purpose:
    Sheet building pipeline: layout, photo embedding and PDF output.

Key Functions:
    - build_sheet(): One render from photo to PDF bytes

Key Classes:
    - SheetBuilder: At-most-one-in-flight render runner
    - SheetConfig: Pipeline configuration
"""

from .config import SheetConfig
from .controller import SheetBuilder, SheetResult, Notice, build_sheet, notice_for
from .layout import LayoutConfig, LayoutMode, ItemKind
from .images import SourceImage

__all__ = [
    "SheetConfig",
    "SheetBuilder",
    "SheetResult",
    "Notice",
    "build_sheet",
    "notice_for",
    "LayoutConfig",
    "LayoutMode",
    "ItemKind",
    "SourceImage",
]
