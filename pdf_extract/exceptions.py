"""
Custom exceptions for PDF Extract.

This module defines all custom exceptions used throughout the library.
"""

from typing import Optional


class PDFExtractException(Exception):
    """Base exception for all PDF Extract errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF extraction error occurred."


class InvalidPDFError(PDFExtractException):
    """Raised when PDF file is missing, unreadable or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFExtractException):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class InvalidOptionsError(PDFExtractException):
    """Raised when extraction options are inconsistent."""

    @property
    def default_message(self) -> str:
        return "Invalid extraction options."


class PageExtractionError(PDFExtractException):
    """Base for failures tied to a single page."""

    def __init__(self, message: str = "", page_num: Optional[int] = None) -> None:
        self.page_num = page_num
        super().__init__(message)

    @property
    def default_message(self) -> str:
        if self.page_num is None:
            return "Failed to extract page."
        return f"Failed to extract page {self.page_num}."


class TextContentError(PageExtractionError):
    """Raised when the text content of a page cannot be retrieved."""

    @property
    def default_message(self) -> str:
        return f"Failed to retrieve text content of page {self.page_num}."


class AnnotationError(PageExtractionError):
    """Raised when the annotations of a page cannot be retrieved."""

    @property
    def default_message(self) -> str:
        return f"Failed to retrieve annotations of page {self.page_num}."


class MetadataError(PDFExtractException):
    """Raised when document metadata cannot be retrieved."""

    @property
    def default_message(self) -> str:
        return "Failed to retrieve document metadata."
