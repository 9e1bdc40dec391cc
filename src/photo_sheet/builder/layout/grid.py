"""
Module: builder.layout.grid

Purpose:
    Layout engine. Maps (layout config, mode) to an ordered tuple of
    Placements. Pure and deterministic: identical inputs give equal output.

Key Functions:
    - layout_uniform(): columns x rows passport grid
    - layout_mixed(): passport rows followed by stamp rows
    - compute_layout(): Dispatch by LayoutMode and validate
    - validate_layout(): Reject placements off the page or overlapping

Row anchors:
    The uniform and mixed passport grids use different vertical anchors
    and are kept as separate functions. uniform_row_anchor() gives the
    bottom edge of a row; mixed_row_anchor() gives the top edge, so mixed
    row 0 sits flush with the top of the page. stamp_row_anchor() scales
    by the passport height, not the stamp height; existing sheets are cut
    to that spacing.

Dependencies:
    - builder.layout.config: LayoutConfig
    - builder.layout.models: Placement, SheetLayout

Used By:
    - builder.controller: Sheet pipeline
"""

from __future__ import annotations

import logging
from typing import List

from photo_sheet.common.errors import LayoutOverflowError

from .config import LayoutConfig
from .models import ItemKind, ItemSpec, LayoutMode, Placement, SheetLayout

logger = logging.getLogger(__name__)

# Fractional row offset used by the stamp anchor
STAMP_ROW_OFFSET = 1.15


def column_x(col: int, item: ItemSpec, margin: float, config: LayoutConfig) -> float:
    """Left edge of a column: (page_margin + col) * column pitch."""
    return (config.page_margin + col) * (item.width + margin)


def uniform_row_anchor(row: int, config: LayoutConfig) -> float:
    """Bottom edge of a uniform-grid row: H - (row + 1) * pitch."""
    pitch = config.passport.height + config.passport_margin
    return config.page.height - (row + 1) * pitch


def mixed_row_anchor(row: int, config: LayoutConfig) -> float:
    """Top edge of a mixed-grid passport row: H - row * pitch."""
    pitch = config.passport.height + config.passport_margin
    return config.page.height - row * pitch


def stamp_row_anchor(row: int, config: LayoutConfig) -> float:
    """Bottom edge of a stamp row: row / 2 + H - (row + 1.15) * passport height."""
    return row / 2 + config.page.height - (row + STAMP_ROW_OFFSET) * config.passport.height


def layout_uniform(config: LayoutConfig) -> tuple[Placement, ...]:
    """
    Place columns x rows passport copies.
    
    Args:
        config: Layout configuration
        
    Returns:
        Placements in row-major order
        
    Example:
        >>> placements = layout_uniform(LayoutConfig())
        >>> len(placements)
        30
        >>> round(placements[0].x, 2), placements[0].y
        (8.97, 248)
    """
    item = config.passport
    placements: List[Placement] = []
    for row in range(config.rows):
        y = uniform_row_anchor(row, config)
        for col in range(config.columns):
            placements.append(Placement(
                kind=ItemKind.PASSPORT,
                x=column_x(col, item, config.passport_margin, config),
                y=y,
                width=item.width,
                height=item.height,
            ))
    return tuple(placements)


def layout_mixed(config: LayoutConfig) -> tuple[Placement, ...]:
    """
    Place passport rows then stamp rows, columns wide.
    
    Rows below ``passport_rows`` hold passport copies spaced by
    ``passport_margin``; the remaining rows hold stamp copies spaced by
    ``stamp_margin``.
    
    Args:
        config: Layout configuration
        
    Returns:
        Placements in row-major order
    """
    placements: List[Placement] = []
    for row in range(config.rows):
        if row < config.passport_rows:
            item, kind, margin = config.passport, ItemKind.PASSPORT, config.passport_margin
            y = mixed_row_anchor(row, config) - item.height
        else:
            item, kind, margin = config.stamp, ItemKind.STAMP, config.stamp_margin
            y = stamp_row_anchor(row, config)
        for col in range(config.columns):
            placements.append(Placement(
                kind=kind,
                x=column_x(col, item, margin, config),
                y=y,
                width=item.width,
                height=item.height,
            ))
    return tuple(placements)


def validate_layout(placements: tuple[Placement, ...], config: LayoutConfig) -> None:
    """
    Check every placement is on the page and none overlap.
    
    Raises:
        LayoutOverflowError: On the first offending placement
    """
    page = config.page
    for index, placement in enumerate(placements):
        if not placement.fits(page):
            raise LayoutOverflowError(
                f"Placement {index} {placement.bbox} falls outside the "
                f"{page.width}x{page.height} page",
                placement=placement,
            )
        for other in placements[:index]:
            if placement.overlaps(other):
                raise LayoutOverflowError(
                    f"Placement {index} {placement.bbox} overlaps {other.bbox}",
                    placement=placement,
                )


def compute_layout(mode: LayoutMode, config: LayoutConfig) -> SheetLayout:
    """
    Compute and validate the placements for a layout mode.
    
    Args:
        mode: UNIFORM or MIXED
        config: Layout configuration
        
    Returns:
        SheetLayout with validated placements
        
    Raises:
        LayoutOverflowError: If the configuration does not fit the page
    """
    if mode is LayoutMode.UNIFORM:
        placements = layout_uniform(config)
    else:
        placements = layout_mixed(config)
    
    validate_layout(placements, config)
    
    layout = SheetLayout(mode=mode, page=config.page, placements=placements)
    logger.debug(
        f"{mode.value} layout: {layout.passport_count} passport, "
        f"{layout.stamp_count} stamp placements"
    )
    return layout
