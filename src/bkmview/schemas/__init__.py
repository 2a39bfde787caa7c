"""Shared schemas for bkmview."""

from bkmview.schemas.document import BookmarkCollection, OutlineDocument
from bkmview.schemas.outline import Destination, FontFlag, OutlineNode, Rect

__all__ = [
    "BookmarkCollection",
    "Destination",
    "FontFlag",
    "OutlineDocument",
    "OutlineNode",
    "Rect",
]
