"""Backend protocol for document parsing engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..types import DocumentMeta, LinkRegion, PageInfo, TextRun


@dataclass
class BackendPage:
    """A single page of a loaded document."""

    num: int

    def get_viewport(self, scale: float = 1.0) -> PageInfo:
        raise NotImplementedError

    async def get_text_content(
        self,
        *,
        normalize_whitespace: bool = False,
        disable_combine_text_items: bool = False,
    ) -> List[TextRun]:
        """Return the page's text runs in content-stream order."""
        raise NotImplementedError

    async def get_annotations(self) -> List[LinkRegion]:
        """Return hyperlink regions that carry a non-empty URL."""
        raise NotImplementedError


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    num_pages: int
    file_size: int

    async def get_page(self, num: int) -> BackendPage:
        raise NotImplementedError

    async def get_metadata(self) -> DocumentMeta:
        raise NotImplementedError


class ExtractionBackend(Protocol):
    """Protocol defining how documents are opened for extraction."""

    def load(self, data: bytes, password: Optional[str] = None) -> BackendDocument:
        """Parse ``data`` and return a backend document wrapper."""
