"""
Module: builder.layout

Purpose:
    Sheet layout engine. Converts a layout mode and configuration into
    positioned copies of the photo on one page.

Key Functions:
    - compute_layout(): Main entry point for layout
    - layout_uniform(): All-passport grid
    - layout_mixed(): Passport + stamp grid

Key Classes:
    - LayoutConfig: Configuration for sheet layout
    - Placement: One positioned copy
    - SheetLayout: Ordered placements for a page

Used By:
    - builder.controller: Sheet pipeline
"""

from .config import LayoutConfig, DEFAULT_PAGE, PASSPORT_ITEM, STAMP_ITEM
from .models import ItemKind, LayoutMode, PageSpec, ItemSpec, Placement, SheetLayout
from .grid import (
    compute_layout,
    layout_uniform,
    layout_mixed,
    validate_layout,
    uniform_row_anchor,
    mixed_row_anchor,
    stamp_row_anchor,
)

__all__ = [
    # Config
    "LayoutConfig",
    "DEFAULT_PAGE",
    "PASSPORT_ITEM",
    "STAMP_ITEM",
    # Models
    "ItemKind",
    "LayoutMode",
    "PageSpec",
    "ItemSpec",
    "Placement",
    "SheetLayout",
    # Functions
    "compute_layout",
    "layout_uniform",
    "layout_mixed",
    "validate_layout",
    "uniform_row_anchor",
    "mixed_row_anchor",
    "stamp_row_anchor",
]
