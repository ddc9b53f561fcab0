"""Build query descriptors for each listing resource."""

from typing import Optional

from application.queries.normalization import (
    clean_text,
    parse_choice,
    parse_datetime,
    parse_enum,
    parse_page,
    parse_page_size,
    parse_sort_direction,
    parse_tri_state,
)
from domain.enums import ApplicationStatus, MarketplaceSort, UserRole
from domain.value_objects import (
    ApplicationQuery,
    MarketplaceQuery,
    PageRequest,
    SortOrder,
    UserQuery,
)

ADMIN_DEFAULT_PAGE_SIZE = 10
ADMIN_MAX_PAGE_SIZE = 50
MARKETPLACE_DEFAULT_PAGE_SIZE = 12
MARKETPLACE_MAX_PAGE_SIZE = 48

APPLICATION_SORT_FIELDS = ("createdAt", "status")
APPLICATION_DEFAULT_SORT = "createdAt"

USER_SORT_FIELDS = ("dateJoined", "firstName", "lastName", "role", "isAdmin", "isDeleted")
USER_DEFAULT_SORT = "dateJoined"

ALL_CATEGORIES = "all"


def build_marketplace_query(
    q: Optional[str] = None,
    category: Optional[str] = None,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    sort: Optional[str] = None,
) -> MarketplaceQuery:
    """Normalize marketplace listing parameters."""
    category_slug = clean_text(category)
    if category_slug == ALL_CATEGORIES:
        category_slug = None

    return MarketplaceQuery(
        search=clean_text(q),
        category_slug=category_slug,
        sort=parse_enum(sort, MarketplaceSort) or MarketplaceSort.NEWEST,
        page=PageRequest(
            page=parse_page(page),
            page_size=parse_page_size(
                page_size, MARKETPLACE_DEFAULT_PAGE_SIZE, MARKETPLACE_MAX_PAGE_SIZE
            ),
        ),
    )


def build_application_query(
    status: Optional[str] = None,
    q: Optional[str] = None,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_dir: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> ApplicationQuery:
    """Normalize admin application listing parameters."""
    return ApplicationQuery(
        status=parse_enum(status, ApplicationStatus, upper=True),
        search=clean_text(q),
        created_from=parse_datetime(date_from),
        created_to=parse_datetime(date_to),
        order=SortOrder(
            parse_choice(sort_by, APPLICATION_SORT_FIELDS, APPLICATION_DEFAULT_SORT),
            parse_sort_direction(sort_dir),
        ),
        page=_admin_page(page, page_size),
    )


def build_user_query(
    q: Optional[str] = None,
    role: Optional[str] = None,
    admin: Optional[str] = None,
    active: Optional[str] = None,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_dir: Optional[str] = None,
) -> UserQuery:
    """Normalize admin user directory parameters."""
    return UserQuery(
        search=clean_text(q),
        role=parse_enum(role, UserRole, upper=True),
        is_admin=parse_tri_state(admin),
        is_active=parse_tri_state(active),
        order=SortOrder(
            parse_choice(sort_by, USER_SORT_FIELDS, USER_DEFAULT_SORT),
            parse_sort_direction(sort_dir),
        ),
        page=_admin_page(page, page_size),
    )


def _admin_page(page: Optional[str], page_size: Optional[str]) -> PageRequest:
    return PageRequest(
        page=parse_page(page),
        page_size=parse_page_size(page_size, ADMIN_DEFAULT_PAGE_SIZE, ADMIN_MAX_PAGE_SIZE),
    )
