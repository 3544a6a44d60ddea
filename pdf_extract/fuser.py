"""Fusion of a page's text runs with its link regions."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .links import LINE_BREAK, LinkSpanTracker, find_matching_link
from .types import LinkRegion, TextRun

_LOGGER = logging.getLogger("pdf_extract")


class PageContentFuser:
    """
    Interleave a page's text runs with anchor markup.

    Runs are consumed in content-stream order. A run belongs to a link when
    its baseline origin lies inside the link rectangle; glyph boxes are not
    considered. A change of ``y`` between consecutive runs starts a new line.
    """

    def fuse(
        self,
        runs: Iterable[TextRun],
        links: Sequence[LinkRegion],
        page_num: Optional[int] = None,
    ) -> str:
        tracker = LinkSpanTracker()
        tokens: List[str] = []
        previous: Optional[TextRun] = None
        count = 0

        for run in runs:
            is_new_line = previous is not None and previous.y != run.y
            match = find_matching_link(links, run.x, run.y)
            tokens.extend(
                tracker.feed(is_new_line, match.url if match else None, run.text.strip())
            )
            previous = run
            count += 1

        tokens.extend(tracker.finish())
        _LOGGER.debug("Fused %d runs with %d links on page %s", count, len(links), page_num)
        return " ".join(tokens) + LINE_BREAK


def fuse_page_content(
    runs: Iterable[TextRun],
    links: Sequence[LinkRegion],
    page_num: Optional[int] = None,
) -> str:
    """Convenience wrapper around :meth:`PageContentFuser.fuse`."""
    return PageContentFuser().fuse(runs, links, page_num)
