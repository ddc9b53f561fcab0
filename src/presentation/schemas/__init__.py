"""Pydantic schemas for request/response validation."""

from .base import CamelModel, HealthResponse, MessageResponse
from .marketplace_schemas import (
    AdminOverviewResponse,
    CategoryResponse,
    DesignCardResponse,
    FavoriteToggleResponse,
    MarketplaceResponse,
    PaginationResponse,
)
from .freelancer_schemas import (
    ApplicantResponse,
    ApplicationListResponse,
    ApplicationResponse,
    ApplyRequest,
    ApplyResponse,
    MyApplicationResponse,
)
from .admin_schemas import (
    SetActiveRequest,
    SetAdminRequest,
    SetRoleRequest,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "CamelModel",
    "HealthResponse",
    "MessageResponse",
    "AdminOverviewResponse",
    "CategoryResponse",
    "DesignCardResponse",
    "FavoriteToggleResponse",
    "MarketplaceResponse",
    "PaginationResponse",
    "ApplicantResponse",
    "ApplicationListResponse",
    "ApplicationResponse",
    "ApplyRequest",
    "ApplyResponse",
    "MyApplicationResponse",
    "SetActiveRequest",
    "SetAdminRequest",
    "SetRoleRequest",
    "UserListResponse",
    "UserResponse",
]
