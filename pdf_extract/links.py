"""Inline hyperlink span tracking."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .types import LinkRegion

CLOSE_TAG = "</a>"
LINE_BREAK = "\n"


def open_tag(url: str, text: str) -> str:
    return f'<a href="{url}">{text}'


def find_matching_link(links: Sequence[LinkRegion], x: float, y: float) -> Optional[LinkRegion]:
    """Return the first region containing ``(x, y)``, in list order."""
    for link in links:
        if link.contains(x, y):
            return link
    return None


class LinkSpanTracker:
    """
    Decide, run by run, whether to open, continue or close an anchor span.

    The tracker is either outside a link (``current_url is None``) or inside
    the span of ``current_url``. Call :meth:`feed` once per text run and
    :meth:`finish` after the last run of the page.
    """

    def __init__(self) -> None:
        self.current_url: Optional[str] = None

    @property
    def in_link(self) -> bool:
        return self.current_url is not None

    def feed(self, is_new_line: bool, matched_url: Optional[str], text: str) -> List[str]:
        tokens: List[str] = []

        if is_new_line:
            if self.current_url is not None:
                tokens.append(CLOSE_TAG)
                self.current_url = None
            tokens.append(LINE_BREAK)

        if matched_url is not None:
            if self.current_url == matched_url:
                tokens.append(text)
            else:
                if self.current_url is not None:
                    tokens.append(CLOSE_TAG)
                self.current_url = matched_url
                tokens.append(open_tag(matched_url, text))
        else:
            if self.current_url is not None:
                tokens.append(CLOSE_TAG)
                self.current_url = None
            tokens.append(text)

        return tokens

    def finish(self) -> List[str]:
        if self.current_url is None:
            return []
        self.current_url = None
        return [CLOSE_TAG]
