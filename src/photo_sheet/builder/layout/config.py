"""
Module: builder.layout.config

Purpose:
    Configuration for the sheet layout engine.
    Defines page size, item sizes, grid shape and margins (millimetres).

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.grid: Placement computation
    - builder.config: SheetConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import ItemSpec, PageSpec


# A4 portrait, millimetres
DEFAULT_PAGE = PageSpec(width=210, height=297)

PASSPORT_ITEM = ItemSpec(width=35, height=45)
STAMP_ITEM = ItemSpec(width=20, height=25)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for sheet layout (immutable).
    
    Attributes:
        page: Page dimensions in mm
        passport: Passport item size in mm
        stamp: Stamp item size in mm
        columns: Items per row
        rows: Logical rows per sheet
        passport_rows: Rows of passport items in mixed mode (rest are stamps)
        passport_margin: Gap between passport items in mm
        stamp_margin: Gap between stamp items in mm
        page_margin: Left offset as a fraction of one column pitch
        
    Example:
        >>> config = LayoutConfig()
        >>> config.item_count
        30
    """
    
    page: PageSpec = DEFAULT_PAGE
    passport: ItemSpec = PASSPORT_ITEM
    stamp: ItemSpec = STAMP_ITEM
    
    # Grid
    columns: int = 5
    rows: int = 6
    passport_rows: int = 4
    
    # Spacing
    passport_margin: float = 4
    stamp_margin: float = 2
    page_margin: float = 0.23  # empirical left-offset knob, not a physical margin
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("page", "passport", "stamp"):
            spec = getattr(self, name)
            if spec.width <= 0 or spec.height <= 0:
                raise ValueError(f"{name} dimensions must be positive: {spec}")
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"grid must be at least 1x1: {self.columns}x{self.rows}")
        if not 0 <= self.passport_rows <= self.rows:
            raise ValueError(
                f"passport_rows must be between 0 and rows ({self.rows}): {self.passport_rows}"
            )
        if self.passport_margin < 0 or self.stamp_margin < 0:
            raise ValueError("Margins must be non-negative")
        if self.page_margin < 0:
            raise ValueError(f"page_margin must be non-negative: {self.page_margin}")
    
    @property
    def item_count(self) -> int:
        """Number of copies placed on one sheet."""
        return self.columns * self.rows
    
    @property
    def stamp_rows(self) -> int:
        """Rows of stamp items in mixed mode."""
        return self.rows - self.passport_rows
