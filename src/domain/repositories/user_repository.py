"""User repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import User
from domain.value_objects import ListPage, UserQuery


class IUserRepository(ABC):
    """
    Abstract repository interface for User entity.
    
    This interface defines the contract for user persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Retrieve a user by ID.
        
        Args:
            user_id: User UUID
            
        Returns:
            User if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist changed fields of an existing user.
        
        Args:
            user: User entity with updated data
            
        Returns:
            Updated User
        """
        pass
    
    @abstractmethod
    async def list(self, query: UserQuery) -> ListPage[User]:
        """
        List users matching a normalized query.
        
        Args:
            query: Filters, ordering and page window
            
        Returns:
            One page of users with the total match count
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Count every user, active or not."""
        pass
