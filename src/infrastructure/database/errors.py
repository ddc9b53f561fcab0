"""Translation of driver and ORM failures into domain errors."""

import functools
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from domain.exceptions import DependencyFailureError

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def translate_db_errors(func: F) -> F:
    """Re-raise SQLAlchemy and connection errors as DependencyFailureError."""
    
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (SQLAlchemyError, OSError) as e:
            raise DependencyFailureError(f"{func.__qualname__} failed: {e}") from e
    
    return wrapper  # type: ignore[return-value]
