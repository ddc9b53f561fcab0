"""Design favorite repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from uuid import UUID


class IFavoriteRepository(ABC):
    """
    Contract over (design, user) favorite pairs.
    
    A favorite is existence-based: a row either exists for the pair or not.
    """
    
    @abstractmethod
    async def exists(self, design_id: UUID, user_id: UUID) -> bool:
        pass
    
    @abstractmethod
    async def add(self, design_id: UUID, user_id: UUID) -> None:
        pass
    
    @abstractmethod
    async def remove(self, design_id: UUID, user_id: UUID) -> None:
        pass
    
    @abstractmethod
    async def count_for_design(self, design_id: UUID) -> int:
        """Count every favorite of a design."""
        pass
    
    @abstractmethod
    async def counts_for_designs(self, design_ids: list[UUID]) -> dict[UUID, int]:
        """
        Count favorites for several designs at once.
        
        Designs without favorites may be absent from the result.
        """
        pass
    
    @abstractmethod
    async def favorited_by(self, user_id: UUID, design_ids: list[UUID]) -> set[UUID]:
        """Return the subset of design_ids the user has favorited."""
        pass
