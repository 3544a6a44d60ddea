"""
PDF Extract - Page text with inline hyperlinks.

This library extracts the text of every requested page of a PDF, wraps the
text that sits inside link annotations in ``<a href="...">`` markup, and
returns the pages in page order together with the document metadata.

Quick Start:
    >>> from pdf_extract import extract_sync
    >>> result = extract_sync('input.pdf', {'firstPage': 1, 'lastPage': 3})
    >>> print(result.pages[0].content)

Main Classes:
    - PDFExtract: Asynchronous file and buffer entry points
    - DocumentAssembler: Concurrent page/metadata fan-out and join
    - PageContentFuser: Fuses a page's text runs with its link regions
    - LinkSpanTracker: Opens and closes anchor spans run by run

Data Classes:
    - TextRun, LinkRegion, PageInfo, PageResult, DocumentMeta, DocumentResult
    - ExtractOptions: Page range and forwarded text options

Exceptions:
    - PDFExtractException: Base exception
    - InvalidPDFError: Missing, unreadable or corrupted PDF
    - EncryptedPDFError: Encrypted PDF
    - TextContentError / AnnotationError: Page retrieval failures
    - MetadataError: Metadata retrieval failure

For CLI usage, use the 'pdf-extract' command after installation.
"""

__version__ = "1.0.0"
__author__ = "PDF Extract Contributors"
__license__ = "MIT"

# Core classes
from pdf_extract.assembler import DocumentAssembler
from pdf_extract.extractor import PDFExtract
from pdf_extract.fuser import PageContentFuser, fuse_page_content
from pdf_extract.joins import CancelOnFailureJoin, FirstFailureJoin
from pdf_extract.links import LinkSpanTracker
from pdf_extract.metadata import MetadataCollector

# Data types
from pdf_extract.config import ExtractOptions
from pdf_extract.types import (
    DocumentMeta,
    DocumentResult,
    LinkRegion,
    PageInfo,
    PageResult,
    TextRun,
)

# Exceptions
from pdf_extract.exceptions import (
    PDFExtractException,
    InvalidPDFError,
    EncryptedPDFError,
    InvalidOptionsError,
    PageExtractionError,
    TextContentError,
    AnnotationError,
    MetadataError,
)

# Utility functions
from pdf_extract.utils import extract_sync, get_pdf_info, validate_pdf, format_file_size

__all__ = [
    # Main classes
    "PDFExtract",
    "DocumentAssembler",
    "PageContentFuser",
    "LinkSpanTracker",
    "MetadataCollector",
    "FirstFailureJoin",
    "CancelOnFailureJoin",
    "fuse_page_content",
    # Data types
    "ExtractOptions",
    "TextRun",
    "LinkRegion",
    "PageInfo",
    "PageResult",
    "DocumentMeta",
    "DocumentResult",
    # Exceptions
    "PDFExtractException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "InvalidOptionsError",
    "PageExtractionError",
    "TextContentError",
    "AnnotationError",
    "MetadataError",
    # Utility functions
    "extract_sync",
    "get_pdf_info",
    "validate_pdf",
    "format_file_size",
    # Version info
    "__version__",
]
