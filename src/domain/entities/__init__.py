"""Domain Entities - Objects with identity."""

from .user import User
from .freelancer_application import FreelancerApplication, ApplicantSummary
from .design import Design, Category, CatalogEntry, FavoriteToggleResult

__all__ = [
    "User",
    "FreelancerApplication",
    "ApplicantSummary",
    "Design",
    "Category",
    "CatalogEntry",
    "FavoriteToggleResult",
]
