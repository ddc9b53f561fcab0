"""SQLAlchemy implementation of design favorite repository."""

from uuid import UUID
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.repositories import IFavoriteRepository
from infrastructure.database.errors import translate_db_errors
from infrastructure.database.models import DesignFavoriteModel


class SQLAlchemyFavoriteRepository(IFavoriteRepository):
    """Concrete implementation of IFavoriteRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    @translate_db_errors
    async def exists(self, design_id: UUID, user_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DesignFavoriteModel).where(
            DesignFavoriteModel.design_id == design_id,
            DesignFavoriteModel.user_id == user_id,
        )
        return bool(await self.session.scalar(stmt))
    
    @translate_db_errors
    async def add(self, design_id: UUID, user_id: UUID) -> None:
        self.session.add(DesignFavoriteModel(design_id=design_id, user_id=user_id))
        await self.session.flush()
    
    @translate_db_errors
    async def remove(self, design_id: UUID, user_id: UUID) -> None:
        await self.session.execute(
            delete(DesignFavoriteModel).where(
                DesignFavoriteModel.design_id == design_id,
                DesignFavoriteModel.user_id == user_id,
            )
        )
    
    @translate_db_errors
    async def count_for_design(self, design_id: UUID) -> int:
        total = await self.session.scalar(
            select(func.count())
            .select_from(DesignFavoriteModel)
            .where(DesignFavoriteModel.design_id == design_id)
        )
        return total or 0
    
    @translate_db_errors
    async def counts_for_designs(self, design_ids: list[UUID]) -> dict[UUID, int]:
        if not design_ids:
            return {}
        stmt = (
            select(DesignFavoriteModel.design_id, func.count())
            .where(DesignFavoriteModel.design_id.in_(design_ids))
            .group_by(DesignFavoriteModel.design_id)
        )
        result = await self.session.execute(stmt)
        return {design_id: count for design_id, count in result.all()}
    
    @translate_db_errors
    async def favorited_by(self, user_id: UUID, design_ids: list[UUID]) -> set[UUID]:
        if not design_ids:
            return set()
        stmt = select(DesignFavoriteModel.design_id).where(
            DesignFavoriteModel.user_id == user_id,
            DesignFavoriteModel.design_id.in_(design_ids),
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
