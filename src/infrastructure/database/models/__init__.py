"""SQLAlchemy ORM models."""

from .user_model import UserModel
from .application_model import FreelancerApplicationModel
from .design_model import CategoryModel, DesignModel, DesignFavoriteModel, design_categories

__all__ = [
    "UserModel",
    "FreelancerApplicationModel",
    "CategoryModel",
    "DesignModel",
    "DesignFavoriteModel",
    "design_categories",
]
