"""Use Case for flipping a user's favorite on a design."""

from uuid import UUID

from domain.entities import FavoriteToggleResult
from domain.exceptions import NotFoundError
from domain.repositories import IDesignRepository, IFavoriteRepository, IUnitOfWork
from infrastructure.config import get_logger


class ToggleDesignFavoriteUseCase:
    """
    Add the favorite if absent, remove it if present.
    
    This is a read-then-write toggle: two concurrent toggles for the same
    pair may both observe the same state. The next toggle corrects it.
    """
    
    def __init__(
        self,
        design_repository: IDesignRepository,
        favorite_repository: IFavoriteRepository,
        unit_of_work: IUnitOfWork,
    ):
        self.design_repo = design_repository
        self.favorite_repo = favorite_repository
        self.uow = unit_of_work
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, user_id: UUID, design_id: UUID) -> FavoriteToggleResult:
        design = await self.design_repo.get_published(design_id)
        if design is None:
            raise NotFoundError("Design", design_id)
        
        try:
            existing = await self.favorite_repo.exists(design_id, user_id)
            if existing:
                await self.favorite_repo.remove(design_id, user_id)
            else:
                await self.favorite_repo.add(design_id, user_id)
            # Same transaction as the write.
            favorites_count = await self.favorite_repo.count_for_design(design_id)
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        
        self.logger.info(
            f"User {user_id} {'removed' if existing else 'added'} favorite on design {design_id}"
        )
        return FavoriteToggleResult(is_favorite=not existing, favorites_count=favorites_count)
