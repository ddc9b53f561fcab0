"""Domain Repository Interfaces - Abstract definitions."""

from .user_repository import IUserRepository
from .application_repository import IApplicationRepository
from .design_repository import IDesignRepository
from .favorite_repository import IFavoriteRepository
from .unit_of_work import IUnitOfWork

__all__ = [
    "IUserRepository",
    "IApplicationRepository",
    "IDesignRepository",
    "IFavoriteRepository",
    "IUnitOfWork",
]
