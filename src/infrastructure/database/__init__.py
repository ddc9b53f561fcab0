"""Database infrastructure module."""

from .session import Base, get_engine, get_session, init_db, close_db
from .unit_of_work import SQLAlchemyUnitOfWork
from .models import (
    UserModel,
    FreelancerApplicationModel,
    CategoryModel,
    DesignModel,
    DesignFavoriteModel,
)

__all__ = [
    "Base",
    "get_engine",
    "get_session",
    "init_db",
    "close_db",
    "SQLAlchemyUnitOfWork",
    "UserModel",
    "FreelancerApplicationModel",
    "CategoryModel",
    "DesignModel",
    "DesignFavoriteModel",
]
