"""Extraction options."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Literal, Mapping, Optional

from .exceptions import InvalidOptionsError

JoinName = Literal["first-failure", "cancel-on-failure"]

JOIN_NAMES = ("first-failure", "cancel-on-failure")

# camelCase keys accepted by ``ExtractOptions.from_mapping``
_ALIASES = {
    "firstPage": "first_page",
    "lastPage": "last_page",
    "normalizeWhitespace": "normalize_whitespace",
    "disableCombineTextItems": "disable_combine_text_items",
    "maxConcurrency": "max_concurrency",
}


@dataclass(frozen=True)
class ExtractOptions:
    """
    Options controlling a document extraction.

    Attributes:
        first_page: First page to extract (1-indexed)
        last_page: Last page to extract; defaults to and is capped at the page count
        normalize_whitespace: Forwarded to text retrieval
        disable_combine_text_items: Forwarded to text retrieval
        password: Password for encrypted documents
        max_concurrency: Maximum number of page tasks running at once; ``None`` is unbounded
        join: Join policy used when a task fails
    """
    first_page: int = 1
    last_page: Optional[int] = None
    normalize_whitespace: bool = False
    disable_combine_text_items: bool = False
    password: Optional[str] = None
    max_concurrency: Optional[int] = None
    join: JoinName = "first-failure"

    def __post_init__(self) -> None:
        if self.first_page < 1:
            raise InvalidOptionsError(f"first_page must be >= 1, got {self.first_page}")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise InvalidOptionsError(
                f"max_concurrency must be >= 1, got {self.max_concurrency}"
            )
        if self.join not in JOIN_NAMES:
            raise InvalidOptionsError(
                f"Unknown join policy '{self.join}'. Expected one of: {', '.join(JOIN_NAMES)}"
            )

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "ExtractOptions":
        """Build options from snake_case or camelCase keys, ignoring unknown ones."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = _ALIASES.get(key, key)
            if name in known and value is not None:
                kwargs[name] = value
        # falsy first page means "from the start"
        if not kwargs.get("first_page", 1):
            kwargs.pop("first_page")
        return cls(**kwargs)

    def resolve_range(self, num_pages: int) -> range:
        """Return the page numbers to extract, possibly empty."""
        last_page = self.last_page if self.last_page else num_pages
        last_page = min(last_page, num_pages)
        return range(self.first_page, last_page + 1)
