"""Use Case for browsing the published design catalog."""

from uuid import UUID

from application.queries import MARKETPLACE_DEFAULT_PAGE_SIZE
from domain.entities import CatalogEntry
from domain.exceptions import DependencyFailureError
from domain.repositories import IDesignRepository, IFavoriteRepository
from domain.value_objects import MarketplacePage, MarketplaceQuery, Pagination
from infrastructure.config import get_logger


class ListMarketplaceDesignsUseCase:
    """List published designs with the caller's favorite state."""
    
    def __init__(
        self,
        design_repository: IDesignRepository,
        favorite_repository: IFavoriteRepository,
    ):
        self.design_repo = design_repository
        self.favorite_repo = favorite_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, user_id: UUID, query: MarketplaceQuery) -> MarketplacePage:
        """
        Run a marketplace query for a user.
        
        Favorite flags and counts are computed for the returned page only.
        A storage failure yields an empty first page instead of an error.
        """
        try:
            result = await self.design_repo.search_published(query)
            categories = await self.design_repo.list_categories()
            
            design_ids = [design.id for design in result.items]
            counts = await self.favorite_repo.counts_for_designs(design_ids)
            favorites = await self.favorite_repo.favorited_by(user_id, design_ids)
        except DependencyFailureError as e:
            self.logger.error(f"❌ Marketplace query failed: {e}", exc_info=True)
            return MarketplacePage(
                designs=[],
                available_categories=[],
                pagination=Pagination.empty(MARKETPLACE_DEFAULT_PAGE_SIZE),
            )
        
        entries = [
            CatalogEntry(
                design=design,
                is_favorite=design.id in favorites,
                favorites_count=counts.get(design.id, 0),
            )
            for design in result.items
        ]
        return MarketplacePage(
            designs=entries,
            available_categories=categories,
            pagination=result.pagination,
        )
