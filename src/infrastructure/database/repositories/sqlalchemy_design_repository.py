"""SQLAlchemy implementation of design catalog repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities import Category, Design
from domain.enums import MarketplaceSort
from domain.repositories import IDesignRepository
from domain.value_objects import ListPage, MarketplaceQuery
from infrastructure.database.errors import translate_db_errors
from infrastructure.database.models import CategoryModel, DesignModel


ORDERINGS = {
    MarketplaceSort.NEWEST: [DesignModel.created_at.desc()],
    MarketplaceSort.PRICE_ASC: [DesignModel.price.asc()],
    MarketplaceSort.PRICE_DESC: [DesignModel.price.desc()],
    MarketplaceSort.RATING: [
        DesignModel.average_rating.desc(),
        DesignModel.review_count.desc(),
        DesignModel.created_at.desc(),
    ],
}


class SQLAlchemyDesignRepository(IDesignRepository):
    """Concrete implementation of IDesignRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    @translate_db_errors
    async def get_published(self, design_id: UUID) -> Optional[Design]:
        """Retrieve a published design by ID."""
        stmt = (
            select(DesignModel)
            .where(DesignModel.id == design_id, DesignModel.is_published == True)  # noqa: E712
            .options(selectinload(DesignModel.categories))
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    @translate_db_errors
    async def search_published(self, query: MarketplaceQuery) -> ListPage[Design]:
        """Search published designs by text and category."""
        conditions = [DesignModel.is_published == True]  # noqa: E712
        if query.search:
            conditions.append(
                or_(
                    DesignModel.title.icontains(query.search, autoescape=True),
                    DesignModel.description.icontains(query.search, autoescape=True),
                )
            )
        if query.category_slug:
            conditions.append(
                DesignModel.categories.any(CategoryModel.slug == query.category_slug)
            )
        
        total = await self.session.scalar(
            select(func.count()).select_from(DesignModel).where(*conditions)
        )
        
        stmt = (
            select(DesignModel)
            .where(*conditions)
            .options(selectinload(DesignModel.categories))
            .order_by(*ORDERINGS[query.sort])
            .offset(query.page.skip)
            .limit(query.page.take)
        )
        result = await self.session.execute(stmt)
        
        return ListPage(
            items=[self._model_to_entity(model) for model in result.scalars().all()],
            total=total or 0,
            page=query.page.page,
            page_size=query.page.page_size,
        )
    
    @translate_db_errors
    async def list_categories(self) -> list[Category]:
        """List every category ordered by name."""
        result = await self.session.execute(select(CategoryModel).order_by(CategoryModel.name.asc()))
        return [self._category_to_entity(model) for model in result.scalars().all()]
    
    @translate_db_errors
    async def count_published(self) -> int:
        total = await self.session.scalar(
            select(func.count()).select_from(DesignModel).where(DesignModel.is_published == True)  # noqa: E712
        )
        return total or 0
    
    def _category_to_entity(self, model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name, slug=model.slug)
    
    def _model_to_entity(self, model: DesignModel) -> Design:
        """Convert ORM model to domain entity."""
        return Design(
            id=model.id,
            title=model.title,
            slug=model.slug,
            description=model.description,
            price=model.price,
            image_url=model.image_url,
            categories=[self._category_to_entity(category) for category in model.categories],
            tags=list(model.tags or []),
            average_rating=model.average_rating,
            review_count=model.review_count,
            is_published=model.is_published,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
