"""Result value objects returned by listing use cases."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from domain.entities import CatalogEntry, Category
from domain.value_objects.pagination import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class ListPage(Generic[T]):
    """One page of items together with the total match count."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def pagination(self) -> Pagination:
        return Pagination(page=self.page, page_size=self.page_size, total=self.total)


@dataclass(frozen=True)
class MarketplacePage:
    """Marketplace listing payload."""

    designs: list[CatalogEntry]
    available_categories: list[Category]
    pagination: Pagination


@dataclass(frozen=True)
class AdminOverview:
    """Aggregate counters for the admin dashboard."""

    users: int = 0
    freelancers: int = 0
    designs: int = 0
    pending_approvals: int = 0
