"""Query builder - turns raw request parameters into query descriptors."""

from .builders import (
    ADMIN_DEFAULT_PAGE_SIZE,
    ADMIN_MAX_PAGE_SIZE,
    MARKETPLACE_DEFAULT_PAGE_SIZE,
    MARKETPLACE_MAX_PAGE_SIZE,
    build_application_query,
    build_marketplace_query,
    build_user_query,
)

__all__ = [
    "ADMIN_DEFAULT_PAGE_SIZE",
    "ADMIN_MAX_PAGE_SIZE",
    "MARKETPLACE_DEFAULT_PAGE_SIZE",
    "MARKETPLACE_MAX_PAGE_SIZE",
    "build_application_query",
    "build_marketplace_query",
    "build_user_query",
]
