"""Domain Enums - Constant values used across the domain."""

from .user_role import UserRole
from .application_status import ApplicationStatus
from .marketplace_sort import MarketplaceSort
from .sort_direction import SortDirection

__all__ = ["UserRole", "ApplicationStatus", "MarketplaceSort", "SortDirection"]
