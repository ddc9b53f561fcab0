"""SQLAlchemy implementation of user repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import User
from domain.enums import UserRole
from domain.repositories import IUserRepository
from domain.value_objects import ListPage, UserQuery
from infrastructure.database.errors import translate_db_errors
from infrastructure.database.models import UserModel


SORT_COLUMNS = {
    "dateJoined": UserModel.date_joined,
    "firstName": UserModel.first_name,
    "lastName": UserModel.last_name,
    "role": UserModel.role,
    "isAdmin": UserModel.is_admin,
    "isDeleted": UserModel.is_deleted,
}


class SQLAlchemyUserRepository(IUserRepository):
    """Concrete implementation of IUserRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    @translate_db_errors
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Retrieve a user by ID."""
        model = await self._get_model(user_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    @translate_db_errors
    async def update(self, user: User) -> User:
        """Update role and flags of an existing user."""
        model = await self._get_model(user.id)
        
        if model is None:
            raise ValueError(f"User {user.id} not found")
        
        model.role = user.role.value
        model.is_admin = user.is_admin
        model.is_deleted = user.is_deleted
        model.verified = user.verified
        model.updated_at = user.updated_at
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    @translate_db_errors
    async def list(self, query: UserQuery) -> ListPage[User]:
        """List users matching filters, sorted and paginated."""
        conditions = self._conditions(query)
        
        total = await self.session.scalar(
            select(func.count()).select_from(UserModel).where(*conditions)
        )
        
        column = SORT_COLUMNS.get(query.order.field, UserModel.date_joined)
        stmt = (
            select(UserModel)
            .where(*conditions)
            .order_by(column.desc() if query.order.descending else column.asc())
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
    async def count(self) -> int:
        total = await self.session.scalar(select(func.count()).select_from(UserModel))
        return total or 0
    
    async def _get_model(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _conditions(self, query: UserQuery) -> list:
        conditions = []
        if query.search:
            conditions.append(
                or_(
                    UserModel.email.icontains(query.search, autoescape=True),
                    UserModel.username.icontains(query.search, autoescape=True),
                    UserModel.first_name.icontains(query.search, autoescape=True),
                    UserModel.last_name.icontains(query.search, autoescape=True),
                )
            )
        if query.role is not None:
            conditions.append(UserModel.role == query.role.value)
        if query.is_admin is not None:
            conditions.append(UserModel.is_admin == query.is_admin)
        if query.is_active is not None:
            conditions.append(UserModel.is_deleted == (not query.is_active))
        return conditions
    
    def _model_to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            email=model.email,
            username=model.username,
            first_name=model.first_name,
            last_name=model.last_name,
            role=UserRole(model.role),
            is_admin=model.is_admin,
            is_deleted=model.is_deleted,
            verified=model.verified,
            date_joined=model.date_joined,
            updated_at=model.updated_at,
        )
