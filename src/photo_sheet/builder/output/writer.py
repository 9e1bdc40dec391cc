"""
Module: builder.output.writer

Purpose:
    Save a finished sheet for the user. Never overwrites an existing
    file: a numbered suffix is added instead.

Key Functions:
    - write_document(): Write PDF bytes into a directory
    - unique_path(): Collision-free target path

Used By:
    - builder.controller: Optional save step
    - gui.main_window: Save action
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "passport_photos.pdf"
PDF_MEDIA_TYPE = "application/pdf"


def unique_path(directory: Path, filename: str = DEFAULT_FILENAME) -> Path:
    """
    Pick a path in directory that does not exist yet.
    
    Example:
        >>> unique_path(Path("out"))
        PosixPath('out/passport_photos (1).pdf')  # if the plain name is taken
    """
    candidate = directory / filename
    stem, suffix = candidate.stem, candidate.suffix
    counter = 1
    while candidate.exists():
        candidate = directory / f"{stem} ({counter}){suffix}"
        counter += 1
    return candidate


def write_document(data: bytes, directory: Path, filename: str = DEFAULT_FILENAME) -> Path:
    """
    Write PDF bytes to directory.
    
    Args:
        data: Document bytes
        directory: Target folder (created if missing)
        filename: Preferred file name
        
    Returns:
        Path actually written
        
    Raises:
        OSError: If the file cannot be written
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = unique_path(directory, filename)
    path.write_bytes(data)
    logger.info(f"Saved sheet to {path}")
    return path
