"""
Module: builder.layout.models

Purpose:
    Data models for sheet layout.
    Immutable dataclasses for page/item sizes, placements and layouts.

Key Classes:
    - ItemKind: Passport or Stamp copy
    - LayoutMode: Uniform (all passport) or Mixed (passport + stamp) grid
    - PageSpec / ItemSpec: Physical sizes in millimetres
    - Placement: One copy positioned on the page
    - SheetLayout: Ordered placements for a page

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.grid: Creates Placements
    - builder.output.renderer: Draws Placements
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ItemKind(Enum):
    """Class of copy being placed."""
    PASSPORT = "passport"
    STAMP = "stamp"


class LayoutMode(Enum):
    """
    Sheet layout mode.
    
    UNIFORM: columns x rows passport copies ("Generate PDF").
    MIXED: passport rows followed by stamp rows ("Multi Photo PDF").
    """
    UNIFORM = "uniform"
    MIXED = "mixed"
    
    @property
    def label(self) -> str:
        """Button label shown in the GUI."""
        return "Generate PDF" if self is LayoutMode.UNIFORM else "Multi Photo PDF"


@dataclass(frozen=True)
class PageSpec:
    """Page dimensions in millimetres."""
    width: float
    height: float


@dataclass(frozen=True)
class ItemSpec:
    """Size of one class of copy in millimetres."""
    width: float
    height: float


@dataclass(frozen=True)
class Placement:
    """
    A copy of the photo positioned on the page.
    
    Coordinates use the document's bottom-left origin, in millimetres.
    
    Attributes:
        kind: Passport or Stamp
        x: Left edge
        y: Bottom edge
        width: Render width
        height: Render height
        
    Example:
        >>> p = Placement(ItemKind.PASSPORT, x=8.97, y=248, width=35, height=45)
        >>> p.top
        293
    """
    
    kind: ItemKind
    x: float
    y: float
    width: float
    height: float
    
    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width
    
    @property
    def top(self) -> float:
        """Top edge (y + height)."""
        return self.y + self.height
    
    @property
    def bbox(self) -> Tuple[float, float, float, float]:
        """Bounding box as (x0, y0, x1, y1)."""
        return (self.x, self.y, self.right, self.top)
    
    def fits(self, page: PageSpec) -> bool:
        """Check the bounding box lies within the page."""
        return (
            self.x >= 0
            and self.y >= 0
            and self.right <= page.width
            and self.top <= page.height
        )
    
    def overlaps(self, other: "Placement") -> bool:
        """Check for a positive-area intersection with another placement."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.top
            and other.y < self.top
        )


@dataclass(frozen=True)
class SheetLayout:
    """
    Ordered placements for one page.
    
    Order is draw order only.
    
    Attributes:
        mode: Layout mode that produced the placements
        page: Page the placements were computed for
        placements: Tuple of Placements
    """
    
    mode: LayoutMode
    page: PageSpec
    placements: tuple[Placement, ...]
    
    @property
    def placement_count(self) -> int:
        """Number of copies on the page."""
        return len(self.placements)
    
    @property
    def passport_count(self) -> int:
        """Number of passport-sized copies."""
        return sum(1 for p in self.placements if p.kind is ItemKind.PASSPORT)
    
    @property
    def stamp_count(self) -> int:
        """Number of stamp-sized copies."""
        return sum(1 for p in self.placements if p.kind is ItemKind.STAMP)
    
    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Union bounding box of all placements as (x0, y0, x1, y1)."""
        if not self.placements:
            return (0.0, 0.0, 0.0, 0.0)
        return (
            min(p.x for p in self.placements),
            min(p.y for p in self.placements),
            max(p.right for p in self.placements),
            max(p.top for p in self.placements),
        )
