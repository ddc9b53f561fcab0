"""Domain Value Objects - Immutable objects without identity."""

from .pagination import PageRequest, Pagination
from .sort_order import SortOrder
from .queries import MarketplaceQuery, ApplicationQuery, UserQuery
from .results import ListPage, MarketplacePage, AdminOverview

__all__ = [
    "PageRequest",
    "Pagination",
    "SortOrder",
    "MarketplaceQuery",
    "ApplicationQuery",
    "UserQuery",
    "ListPage",
    "MarketplacePage",
    "AdminOverview",
]
