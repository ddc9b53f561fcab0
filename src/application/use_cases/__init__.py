"""Application use cases - one class per operation."""

from .list_marketplace_designs import ListMarketplaceDesignsUseCase
from .toggle_design_favorite import ToggleDesignFavoriteUseCase
from .apply_for_freelancer import ApplyForFreelancerUseCase, ApplyResult
from .get_my_application import GetMyApplicationUseCase, MyApplication, NO_APPLICATION
from .review_freelancer_application import (
    ApproveFreelancerApplicationUseCase,
    RejectFreelancerApplicationUseCase,
)
from .list_freelancer_applications import ListFreelancerApplicationsUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .get_admin_overview import GetAdminOverviewUseCase

__all__ = [
    "ListMarketplaceDesignsUseCase",
    "ToggleDesignFavoriteUseCase",
    "ApplyForFreelancerUseCase",
    "ApplyResult",
    "GetMyApplicationUseCase",
    "MyApplication",
    "NO_APPLICATION",
    "ApproveFreelancerApplicationUseCase",
    "RejectFreelancerApplicationUseCase",
    "ListFreelancerApplicationsUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "GetAdminOverviewUseCase",
]
