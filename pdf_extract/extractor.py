"""Public entry points for extracting link-annotated text from PDFs."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .assembler import DocumentAssembler
from .backends import PypdfBackend
from .backends.base import ExtractionBackend
from .config import ExtractOptions
from .exceptions import InvalidPDFError
from .types import DocumentResult

_LOGGER = logging.getLogger("pdf_extract")

OptionsLike = Union[ExtractOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> ExtractOptions:
    if isinstance(options, ExtractOptions):
        return options
    return ExtractOptions.from_mapping(options)


class PDFExtract:
    """
    Extract page content fused with hyperlink markup.

    Example:
        >>> result = await PDFExtract().extract("report.pdf", {"firstPage": 2})
        >>> result.pages[0].content
    """

    def __init__(
        self,
        *,
        backend: Optional[ExtractionBackend] = None,
        assembler: Optional[DocumentAssembler] = None,
    ) -> None:
        self.backend: ExtractionBackend = backend or PypdfBackend()
        self.assembler = assembler or DocumentAssembler()

    async def extract(self, filename: Union[str, Path], options: OptionsLike = None) -> DocumentResult:
        """Read ``filename`` and extract it."""
        path = Path(filename)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {filename}")
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {filename}. Error: {exc}") from exc

        result = await self.extract_buffer(data, options)
        return dataclasses.replace(result, filename=str(filename))

    async def extract_buffer(self, data: bytes, options: OptionsLike = None) -> DocumentResult:
        """Extract a PDF held in memory."""
        resolved = _coerce_options(options)
        document = await asyncio.to_thread(self.backend.load, bytes(data), resolved.password)
        _LOGGER.debug("Extracting document with %d pages", document.num_pages)
        return await self.assembler.assemble(document, resolved)
