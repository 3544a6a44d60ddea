"""
Type definitions and dataclasses for PDF Extract.

This module defines the fixed-shape records exchanged between the
extraction engine, the page fuser and the document assembler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class TextRun:
    """
    One positioned piece of extracted text.

    Attributes:
        text: Raw text of the run as reported by the engine
        x: Horizontal baseline origin in page space
        y: Vertical baseline origin in page space
    """
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LinkRegion:
    """
    A rectangular page area associated with a target URL.

    Attributes:
        url: Target of the hyperlink
        rect: ``(x1, y1, x2, y2)`` in page space, normalized so x1 <= x2, y1 <= y2
    """
    url: str
    rect: Rect

    def contains(self, x: float, y: float) -> bool:
        """Inclusive point containment on all four sides."""
        x1, y1, x2, y2 = self.rect
        return x1 <= x <= x2 and y1 <= y <= y2


@dataclass(frozen=True)
class PageInfo:
    """
    Viewport descriptor of a page.

    Attributes:
        num: 1-indexed page number
        scale: Viewport scale factor
        rotation: Page rotation in degrees (0, 90, 180 or 270)
        offset_x: Horizontal viewport offset
        offset_y: Vertical viewport offset
        width: Viewport width in points
        height: Viewport height in points
    """
    num: int
    scale: float
    rotation: int
    offset_x: float
    offset_y: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num": self.num,
            "scale": self.scale,
            "rotation": self.rotation,
            "offsetX": self.offset_x,
            "offsetY": self.offset_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class PageResult:
    """Fused content of a single page."""
    page_info: PageInfo
    content: str

    @property
    def num(self) -> int:
        return self.page_info.num

    def to_dict(self) -> Dict[str, Any]:
        return {"pageInfo": self.page_info.to_dict(), "content": self.content}


@dataclass(frozen=True)
class DocumentMeta:
    """
    Document-level metadata.

    Attributes:
        info: Entries of the document information dictionary
        metadata: Flattened XMP metadata, or ``None`` when the document has none
    """
    info: Mapping[str, Any] = field(default_factory=dict)
    metadata: Optional[Mapping[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "info": dict(self.info),
            "metadata": dict(self.metadata) if self.metadata is not None else None,
        }


@dataclass(frozen=True)
class DocumentResult:
    """
    Result of a document extraction.

    ``pages`` is sorted strictly ascending by page number.

    Attributes:
        meta: Document-level metadata
        pages: Extracted pages in page order
        num_pages: Total page count of the document
        filename: Source file path when extracted from a file
    """
    meta: DocumentMeta
    pages: Tuple[PageResult, ...]
    num_pages: int = 0
    filename: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "meta": self.meta.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
            "pdfInfo": {"numPages": self.num_pages},
        }
        if self.filename is not None:
            data["filename"] = self.filename
        return data

    def __str__(self) -> str:
        return f"DocumentResult(pages={len(self.pages)}, num_pages={self.num_pages})"
