"""Document-level metadata collection."""

from __future__ import annotations

import logging

from .backends.base import BackendDocument
from .types import DocumentMeta

_LOGGER = logging.getLogger("pdf_extract")


class MetadataCollector:
    """Fetch a document's info dictionary and XMP metadata as one unit of work."""

    async def collect(self, document: BackendDocument) -> DocumentMeta:
        meta = await document.get_metadata()
        _LOGGER.debug(
            "Collected metadata: %d info entries, xmp=%s",
            len(meta.info),
            "yes" if meta.metadata is not None else "no",
        )
        return meta
