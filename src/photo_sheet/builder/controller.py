"""
Module: builder.controller

Purpose:
    Orchestrate one sheet render.
    Check photo → Layout → Embed → Draw → Serialize

Key Functions:
    - build_sheet(): Main entry point for one render
    - notice_for(): Turn a failure into a banner notice

Key Classes:
    - SheetBuilder: Enforces at most one render in flight
    - SheetResult: Finished document plus its layout
    - Notice: Message for the notification banner

Used By:
    - gui.main_window: "Generate PDF" and "Multi Photo PDF" actions
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from photo_sheet.common.errors import RenderInProgressError, SheetError

from .config import SheetConfig, DEFAULT_NOTICE_TIMEOUT_MS
from .images import SourceImage, embed_image, require_image
from .layout import LayoutMode, SheetLayout, compute_layout
from .output.renderer import Embedder, render_sheet
from .output.writer import PDF_MEDIA_TYPE, write_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetResult:
    """
    Finished sheet (immutable).
    
    Attributes:
        document: PDF bytes
        layout: Placements that were drawn
        filename: Name to offer when saving
        elapsed: Render time in seconds
    """
    document: bytes
    layout: SheetLayout
    filename: str
    elapsed: float = 0.0
    media_type: str = PDF_MEDIA_TYPE
    
    @property
    def size_bytes(self) -> int:
        return len(self.document)
    
    def save(self, directory: Path) -> Path:
        """Write the document into directory without overwriting."""
        return write_document(self.document, directory, self.filename)


@dataclass(frozen=True)
class Notice:
    """
    One message for the notification banner.
    
    The banner owns dismissal; timeout_ms is a hint.
    """
    message: str
    level: str = "error"
    timeout_ms: int = DEFAULT_NOTICE_TIMEOUT_MS


def notice_for(exc: BaseException, timeout_ms: int = DEFAULT_NOTICE_TIMEOUT_MS) -> Notice:
    """
    Convert a render failure into a banner notice.
    
    Example:
        >>> notice_for(MissingImageError()).message
        'Please select an image before generating the PDF.'
    """
    if isinstance(exc, SheetError):
        message = exc.user_message
    else:
        message = f"Error generating PDF: {exc}"
    return Notice(message=message, level="error", timeout_ms=timeout_ms)


def build_sheet(
    source: Optional[SourceImage],
    mode: Union[LayoutMode, str],
    config: Optional[SheetConfig] = None,
    *,
    embed: Embedder = embed_image,
) -> SheetResult:
    """
    Render one sheet from start to finish.
    
    Pipeline:
    1. Check a photo is loaded
    2. Compute placements for the mode
    3. Embed the photo once and draw every placement
    4. Serialize to PDF bytes
    
    Args:
        source: Loaded photo, or None
        mode: LayoutMode or its value ("uniform"/"mixed")
        config: Sheet configuration (defaults to A4 passport sheet)
        embed: Decoder, called once per render
        
    Returns:
        SheetResult with document bytes
        
    Raises:
        MissingImageError: If no photo is loaded
        UnsupportedFormatError: If the photo is not PNG/JPEG
        LayoutOverflowError: If the configured grid does not fit the page
        RenderError: If decoding or serialization fails
    """
    config = config or SheetConfig()
    mode = LayoutMode(mode)
    start_time = time.perf_counter()
    
    source = require_image(source)
    logger.info(f"Starting {mode.value} sheet for {source.name}")
    
    layout = compute_layout(mode, config.layout)
    logger.info(f"Computed {layout.placement_count} placements")
    
    document = render_sheet(source, layout, units=config.units, embed=embed)
    
    elapsed = time.perf_counter() - start_time
    logger.info(f"Sheet generation completed in {elapsed:.2f}s")
    
    return SheetResult(
        document=document,
        layout=layout,
        filename=config.output_filename,
        elapsed=elapsed,
    )


class SheetBuilder:
    """
    Runs sheet renders one at a time.
    
    A build() call made while another is running raises
    RenderInProgressError instead of queuing.
    
    Example:
        >>> builder = SheetBuilder()
        >>> result = builder.build(source, LayoutMode.MIXED)
    """
    
    def __init__(self, config: Optional[SheetConfig] = None, *, embed: Embedder = embed_image) -> None:
        self.config = config or SheetConfig()
        self._embed = embed
        self._lock = threading.Lock()
    
    @property
    def busy(self) -> bool:
        """True while a render is running."""
        return self._lock.locked()
    
    def build(self, source: Optional[SourceImage], mode: Union[LayoutMode, str]) -> SheetResult:
        """Render one sheet, rejecting overlapping calls."""
        if not self._lock.acquire(blocking=False):
            logger.warning("Render requested while another is in progress")
            raise RenderInProgressError()
        try:
            return build_sheet(source, mode, self.config, embed=self._embed)
        finally:
            self._lock.release()
    
    def notice(self, exc: BaseException) -> Notice:
        """Banner notice for a failure, using the configured timeout."""
        return notice_for(exc, self.config.notice_timeout_ms)
