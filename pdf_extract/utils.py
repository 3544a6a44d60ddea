"""Utility functions for PDF extraction."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from .backends import PypdfBackend
from .exceptions import InvalidPDFError, PDFExtractException
from .extractor import OptionsLike, PDFExtract
from .metadata import MetadataCollector
from .types import DocumentMeta, DocumentResult


def extract_sync(filename: Union[str, Path], options: OptionsLike = None) -> DocumentResult:
    """Blocking wrapper around :meth:`PDFExtract.extract`."""

    return asyncio.run(PDFExtract().extract(filename, options))


def get_pdf_info(
    pdf_path: Union[str, Path], password: Optional[str] = None
) -> Tuple[int, DocumentMeta]:
    """
    Read the page count and metadata of a PDF without extracting any page.

    Returns:
        Tuple of (number of pages, document metadata)
    """
    path = Path(pdf_path)
    if not path.is_file():
        raise InvalidPDFError(f"PDF file not found: {pdf_path}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InvalidPDFError(f"Unable to read PDF file: {exc}") from exc

    document = PypdfBackend().load(data, password=password)
    meta = asyncio.run(MetadataCollector().collect(document))
    return document.num_pages, meta


def validate_pdf(pdf_path: str, password: Optional[str] = None) -> Tuple[bool, str]:
    """Perform lightweight validation of a PDF file."""

    if not os.path.exists(pdf_path):
        return False, f"File not found: {pdf_path}"

    if not os.path.isfile(pdf_path):
        return False, f"Path is not a file: {pdf_path}"

    if not os.access(pdf_path, os.R_OK):
        return False, f"Cannot read file (permission denied): {pdf_path}"

    try:
        PypdfBackend().load(Path(pdf_path).read_bytes(), password=password)
        return True, ""
    except PDFExtractException as exc:
        return False, str(exc)
    except OSError as exc:
        return False, f"Unable to read PDF file: {exc}"


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
