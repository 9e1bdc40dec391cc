"""
Module: builder.images.source

Purpose:
    In-memory photo handed from the intake side to the pipeline.
    Encoding comes from the declared media type only; bytes are never
    sniffed.

Key Classes:
    - ImageEncoding: PNG or JPEG
    - SourceImage: Raw bytes plus declared media type

Key Functions:
    - parse_media_type(): "image/<subtype>" -> ImageEncoding
    - require_image(): Precondition check for a render call

Dependencies:
    - base64, mimetypes (std)

Used By:
    - builder.images.embedder: Decoding
    - builder.controller: Render precondition
    - gui.main_window: File intake
"""

from __future__ import annotations

import base64
import binascii
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from photo_sheet.common.errors import MissingImageError, UnsupportedFormatError

DATA_URL_PREFIX = "data:"


class ImageEncoding(Enum):
    """Encodings the renderer can embed."""
    PNG = "png"
    JPEG = "jpeg"


_SUBTYPES = {
    "png": ImageEncoding.PNG,
    "jpeg": ImageEncoding.JPEG,
    "jpg": ImageEncoding.JPEG,
}


def parse_media_type(media_type: str) -> ImageEncoding:
    """
    Resolve a declared media type to an encoding.
    
    Parameters after ``;`` are ignored and matching is case-insensitive.
    
    Args:
        media_type: String like "image/png" or "image/jpeg; q=1"
        
    Returns:
        ImageEncoding for the subtype
        
    Raises:
        UnsupportedFormatError: For anything other than png, jpeg or jpg
        
    Example:
        >>> parse_media_type("image/jpg")
        <ImageEncoding.JPEG: 'jpeg'>
    """
    essence = (media_type or "").split(";")[0].strip().lower()
    main, _, subtype = essence.partition("/")
    if main != "image" or subtype not in _SUBTYPES:
        raise UnsupportedFormatError(media_type)
    return _SUBTYPES[subtype]


@dataclass(frozen=True)
class SourceImage:
    """
    User-supplied photo (immutable).
    
    Attributes:
        data: Raw encoded image bytes
        media_type: Declared media type, e.g. "image/png"
        name: Display name (file name when loaded from disk)
    """
    
    data: bytes
    media_type: str
    name: str = "photo"
    
    @property
    def encoding(self) -> ImageEncoding:
        """Encoding derived from the declared media type."""
        return parse_media_type(self.media_type)
    
    @property
    def size_bytes(self) -> int:
        return len(self.data)
    
    @classmethod
    def from_path(cls, path: Path) -> "SourceImage":
        """
        Read a photo from disk, declaring its media type from the extension.
        
        Unknown extensions are declared as application/octet-stream and
        rejected at render time.
        """
        path = Path(path)
        media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            data=path.read_bytes(),
            media_type=media_type or "application/octet-stream",
            name=path.name,
        )
    
    @classmethod
    def from_data_url(cls, url: str, name: str = "photo") -> "SourceImage":
        """
        Decode a ``data:image/<subtype>;base64,<payload>`` string.
        
        Raises:
            ValueError: If the string is not a base64 data URL
        """
        if not url.startswith(DATA_URL_PREFIX) or "," not in url:
            raise ValueError("Not a data URL")
        header, _, payload = url.partition(",")
        params = header[len(DATA_URL_PREFIX):].split(";")
        if "base64" not in params[1:]:
            raise ValueError("Only base64 data URLs are supported")
        try:
            data = base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 payload: {e}") from e
        return cls(data=data, media_type=params[0], name=name)


def require_image(source: Optional[SourceImage]) -> SourceImage:
    """
    Check a photo is loaded.
    
    Raises:
        MissingImageError: If source is None or empty
    """
    if source is None or not source.data:
        raise MissingImageError()
    return source
