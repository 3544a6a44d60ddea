"""
Concurrent assembly of a document result.

One task is launched per requested page plus one for document metadata.
Tasks may finish in any order; pages are sorted by number once every task
has been joined.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .backends.base import BackendDocument
from .config import ExtractOptions
from .fuser import PageContentFuser
from .joins import JoinStrategy, get_join_strategy
from .metadata import MetadataCollector
from .types import DocumentResult, PageResult

_LOGGER = logging.getLogger("pdf_extract")


class DocumentAssembler:
    """Fan out page and metadata tasks, join them and build a DocumentResult."""

    def __init__(
        self,
        *,
        fuser: Optional[PageContentFuser] = None,
        metadata_collector: Optional[MetadataCollector] = None,
        join: Optional[JoinStrategy] = None,
    ) -> None:
        self.fuser = fuser or PageContentFuser()
        self.metadata_collector = metadata_collector or MetadataCollector()
        self.join = join

    async def extract_page(
        self, document: BackendDocument, page_num: int, options: ExtractOptions
    ) -> PageResult:
        """Extract and fuse the content of a single page."""
        page = await document.get_page(page_num)
        page_info = page.get_viewport(scale=1.0)
        runs = await page.get_text_content(
            normalize_whitespace=options.normalize_whitespace,
            disable_combine_text_items=options.disable_combine_text_items,
        )
        links = await page.get_annotations()
        return PageResult(page_info=page_info, content=self.fuser.fuse(runs, links, page_num))

    async def assemble(
        self, document: BackendDocument, options: Optional[ExtractOptions] = None
    ) -> DocumentResult:
        options = options or ExtractOptions()
        page_numbers = options.resolve_range(document.num_pages)
        join = self.join or get_join_strategy(options.join)
        semaphore = (
            asyncio.Semaphore(options.max_concurrency) if options.max_concurrency else None
        )

        async def run_page(page_num: int) -> PageResult:
            if semaphore is None:
                return await self.extract_page(document, page_num, options)
            async with semaphore:
                return await self.extract_page(document, page_num, options)

        _LOGGER.debug(
            "Launching %d page tasks (pages %d-%d of %d)",
            len(page_numbers),
            page_numbers.start,
            page_numbers.stop - 1,
            document.num_pages,
        )
        meta_task = asyncio.create_task(
            self.metadata_collector.collect(document), name="pdf-extract-metadata"
        )
        page_tasks = [
            asyncio.create_task(run_page(num), name=f"pdf-extract-page-{num}")
            for num in page_numbers
        ]

        results = await join.join([meta_task, *page_tasks])

        meta = results[0]
        pages = tuple(sorted(results[1:], key=lambda page: page.num))
        _LOGGER.debug("Assembled %d pages", len(pages))
        return DocumentResult(meta=meta, pages=pages, num_pages=document.num_pages)
