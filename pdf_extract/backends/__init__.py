"""Backend abstractions for PDF Extract."""

from .base import BackendDocument, BackendPage, ExtractionBackend
from .pypdf_backend import PypdfBackend

__all__ = [
    "BackendDocument",
    "BackendPage",
    "ExtractionBackend",
    "PypdfBackend",
]
