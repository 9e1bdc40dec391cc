"""
Module: builder.images

Purpose:
    Photo intake and decoding for sheet rendering.

Key Classes:
    - SourceImage: Raw bytes plus declared media type
    - EmbeddedImage: Decoded handle reused for every draw

Key Functions:
    - parse_media_type(): Declared type -> ImageEncoding
    - require_image(): Missing-photo precondition
    - embed_image(): One decode per render
"""

from .source import ImageEncoding, SourceImage, parse_media_type, require_image
from .embedder import EmbeddedImage, embed_image

__all__ = [
    "ImageEncoding",
    "SourceImage",
    "parse_media_type",
    "require_image",
    "EmbeddedImage",
    "embed_image",
]
