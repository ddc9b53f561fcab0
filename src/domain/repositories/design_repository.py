"""Design catalog repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Category, Design
from domain.value_objects import ListPage, MarketplaceQuery


class IDesignRepository(ABC):
    """Read contract over the published design catalog."""
    
    @abstractmethod
    async def get_published(self, design_id: UUID) -> Optional[Design]:
        """
        Retrieve a design by ID if it is published.
        
        Args:
            design_id: Design UUID
            
        Returns:
            Design if found and published, None otherwise
        """
        pass
    
    @abstractmethod
    async def search_published(self, query: MarketplaceQuery) -> ListPage[Design]:
        """
        Search published designs.
        
        Args:
            query: Search text, category, sort option and page window
            
        Returns:
            One page of designs with the total match count
        """
        pass
    
    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """List every category ordered by name."""
        pass
    
    @abstractmethod
    async def count_published(self) -> int:
        """Count published designs."""
        pass
