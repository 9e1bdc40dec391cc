"""
Module: builder.config

Purpose:
    Configuration dataclass for the sheet pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - SheetConfig: Main configuration for building sheets

Used By:
    - builder.controller: Sheet pipeline
    - gui.main_window: Builder construction
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .layout.config import LayoutConfig
from .output.renderer import unit_scale
from .output.writer import DEFAULT_FILENAME

DEFAULT_NOTICE_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for building sheets (immutable).
    
    Attributes:
        layout: Page, item and grid configuration
        units: "mm" for true-size output, "pt" for legacy point units
        output_filename: File name offered when saving
        notice_timeout_ms: How long error notices stay visible
    
    Example:
        >>> config = SheetConfig(layout=LayoutConfig(columns=4))
        >>> config.layout.item_count
        24
    """
    
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    units: str = "mm"
    output_filename: str = DEFAULT_FILENAME
    notice_timeout_ms: int = DEFAULT_NOTICE_TIMEOUT_MS
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        unit_scale(self.units)
        if not self.output_filename.lower().endswith(".pdf"):
            raise ValueError(f"output_filename must end in .pdf: {self.output_filename!r}")
        if self.notice_timeout_ms < 0:
            raise ValueError(f"notice_timeout_ms must be non-negative: {self.notice_timeout_ms}")
