"""Paging value objects shared by every listing."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageRequest:
    """
    Immutable 1-based page window.

    Attributes:
        page: Page number, starting at 1
        page_size: Maximum number of items per page
    """

    page: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        """Validate paging bounds."""
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata returned alongside a page of results."""

    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        # Never zero so page selectors always have at least one page.
        return max(math.ceil(self.total / self.page_size), 1)

    @classmethod
    def empty(cls, page_size: int) -> "Pagination":
        return cls(page=1, page_size=page_size, total=0)
