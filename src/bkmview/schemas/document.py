"""Bookmark document models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bkmview.schemas.outline import OutlineNode


class OutlineDocument(BaseModel):
    """One bookmarks view over a source document.

    Attributes:
        source_path: Identifier of the document the view belongs to.
        title: Name of the view.
        nodes: Top-level entries, in file order.
    """

    source_path: str
    title: str
    nodes: list[OutlineNode] = Field(..., min_length=1)

    @property
    def root(self) -> OutlineNode:
        """First top-level entry."""
        return self.nodes[0]


class BookmarkCollection(BaseModel):
    """All bookmark views stored in one ``.bkm`` file."""

    documents: list[OutlineDocument] = Field(default_factory=list)
