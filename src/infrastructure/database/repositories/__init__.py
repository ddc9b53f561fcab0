"""SQLAlchemy repository implementations."""

from .sqlalchemy_user_repository import SQLAlchemyUserRepository
from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_design_repository import SQLAlchemyDesignRepository
from .sqlalchemy_favorite_repository import SQLAlchemyFavoriteRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyDesignRepository",
    "SQLAlchemyFavoriteRepository",
]
