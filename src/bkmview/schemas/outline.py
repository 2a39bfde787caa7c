"""Outline tree models."""

from __future__ import annotations

from enum import IntFlag

from pydantic import BaseModel, Field, field_validator


class FontFlag(IntFlag):
    """Font style bits stored in ``OutlineNode.font_flags``."""

    BOLD = 1
    ITALIC = 2


class Rect(BaseModel):
    """Target rectangle of a destination, in page coordinates."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.dx == 0 or self.dy == 0


class Destination(BaseModel):
    """A typed pointer to a location in the source document.

    Attributes:
        kind: Destination kind tag (e.g. "scrollto"). Written unquoted, so it
            cannot contain whitespace or start with a quote.
        name: Optional named destination.
        value: Optional destination value (e.g. a URL).
        page_no: Target page, 0 when the destination has no page.
        rect: Optional target rectangle. An empty rectangle is stored as None.
    """

    kind: str = Field(..., min_length=1, pattern=r'^[^\s"]\S*$')
    name: str | None = None
    value: str | None = None
    page_no: int = Field(0, ge=0)
    rect: Rect | None = None

    @field_validator("rect")
    @classmethod
    def drop_empty_rect(cls, rect: Rect | None) -> Rect | None:
        if rect is not None and rect.is_empty:
            return None
        return rect


class OutlineNode(BaseModel):
    """A single entry of a bookmarks view.

    Each node owns its children list; a node is never shared between two
    parents.
    """

    title: str = ""
    font_flags: int = Field(0, ge=0, le=int(FontFlag.BOLD | FontFlag.ITALIC))
    # None means "no color"; 0 is black.
    color: int | None = Field(None, ge=0, le=0xFFFFFF)
    page_no: int = Field(0, ge=0)
    is_open_default: bool = False
    is_open_toggled: bool = False
    is_unchecked: bool = False
    destination: Destination | None = None
    children: list["OutlineNode"] = Field(default_factory=list)

    @property
    def is_bold(self) -> bool:
        return bool(self.font_flags & FontFlag.BOLD)

    @property
    def is_italic(self) -> bool:
        return bool(self.font_flags & FontFlag.ITALIC)

    def page_numbers_match(self) -> bool:
        """Check that the node's page agrees with its destination's page."""
        dest = self.destination
        if dest is None or dest.page_no == 0:
            return True
        return dest.page_no == self.page_no
