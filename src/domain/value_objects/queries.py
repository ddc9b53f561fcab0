"""Normalized query descriptors handed from the application layer to repositories."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.enums import ApplicationStatus, MarketplaceSort, UserRole
from domain.value_objects.pagination import PageRequest
from domain.value_objects.sort_order import SortOrder


@dataclass(frozen=True)
class MarketplaceQuery:
    """
    Filter, ordering and page window for published designs.

    Attributes:
        search: Case-insensitive substring matched on title or description
        category_slug: Category slug, None means every category
        sort: Combined sort option
        page: Page window
    """

    search: Optional[str] = None
    category_slug: Optional[str] = None
    sort: MarketplaceSort = MarketplaceSort.NEWEST
    page: PageRequest = field(default_factory=lambda: PageRequest(page_size=12))


@dataclass(frozen=True)
class ApplicationQuery:
    """Filter, ordering and page window for freelancer applications."""

    status: Optional[ApplicationStatus] = None
    search: Optional[str] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None
    order: SortOrder = field(default_factory=lambda: SortOrder("createdAt"))
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True)
class UserQuery:
    """Filter, ordering and page window for the user directory."""

    search: Optional[str] = None
    role: Optional[UserRole] = None
    is_admin: Optional[bool] = None
    is_active: Optional[bool] = None
    order: SortOrder = field(default_factory=lambda: SortOrder("dateJoined"))
    page: PageRequest = field(default_factory=PageRequest)
