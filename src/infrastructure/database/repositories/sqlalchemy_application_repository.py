"""SQLAlchemy implementation of freelancer application repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import case, func, inspect, or_, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities import ApplicantSummary, FreelancerApplication
from domain.enums import ApplicationStatus
from domain.repositories import IApplicationRepository
from domain.value_objects import ApplicationQuery, ListPage
from infrastructure.database.errors import translate_db_errors
from infrastructure.database.models import FreelancerApplicationModel, UserModel


# Lifecycle order, not alphabetical.
STATUS_RANK = case(
    {status.value: rank for rank, status in enumerate(ApplicationStatus)},
    value=FreelancerApplicationModel.status,
)

# Dialects with INSERT .. ON CONFLICT DO UPDATE.
UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    @translate_db_errors
    async def get_by_id(self, application_id: UUID) -> Optional[FreelancerApplication]:
        """Retrieve an application by ID."""
        stmt = select(FreelancerApplicationModel).where(
            FreelancerApplicationModel.id == application_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    @translate_db_errors
    async def get_by_user_id(self, user_id: UUID) -> Optional[FreelancerApplication]:
        """Retrieve the application owned by a user."""
        model = await self._get_model_by_user(user_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    @translate_db_errors
    async def insert_pending(
        self,
        application: FreelancerApplication,
    ) -> tuple[FreelancerApplication, bool]:
        """Insert, or overwrite status and notes of the row already keyed by user_id."""
        insert = UPSERT_INSERTS[self.session.get_bind().dialect.name]
        stmt = insert(FreelancerApplicationModel).values(
            id=application.id,
            user_id=application.user_id,
            status=application.status.value,
            notes=application.notes,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[FreelancerApplicationModel.user_id],
            set_={
                "status": stmt.excluded.status,
                "notes": stmt.excluded.notes,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(FreelancerApplicationModel.id)
        stored_id = (await self.session.execute(stmt)).scalar_one()
        
        # A conflicting row keeps its own id, so a new id means a new row.
        model = await self.session.get(FreelancerApplicationModel, stored_id, populate_existing=True)
        return self._model_to_entity(model), stored_id == application.id
    
    @translate_db_errors
    async def update(self, application: FreelancerApplication) -> FreelancerApplication:
        """Update status and notes of an existing application."""
        stmt = select(FreelancerApplicationModel).where(
            FreelancerApplicationModel.id == application.id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            raise ValueError(f"Freelancer application {application.id} not found")
        
        model.status = application.status.value
        model.notes = application.notes
        model.updated_at = application.updated_at
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    @translate_db_errors
    async def list(self, query: ApplicationQuery) -> ListPage[FreelancerApplication]:
        """List applications with applicant summary, filtered and paginated."""
        conditions = self._conditions(query)
        
        count_stmt = (
            select(func.count(FreelancerApplicationModel.id))
            .join(FreelancerApplicationModel.user)
            .where(*conditions)
        )
        total = await self.session.scalar(count_stmt)
        
        stmt = (
            select(FreelancerApplicationModel)
            .join(FreelancerApplicationModel.user)
            .where(*conditions)
            .options(selectinload(FreelancerApplicationModel.user))
            .order_by(*self._ordering(query))
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
    async def count_by_status(self, status: ApplicationStatus) -> int:
        total = await self.session.scalar(
            select(func.count(FreelancerApplicationModel.id)).where(
                FreelancerApplicationModel.status == status.value
            )
        )
        return total or 0
    
    async def _get_model_by_user(self, user_id: UUID) -> Optional[FreelancerApplicationModel]:
        stmt = select(FreelancerApplicationModel).where(
            FreelancerApplicationModel.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _conditions(self, query: ApplicationQuery) -> list:
        conditions = []
        if query.status is not None:
            conditions.append(FreelancerApplicationModel.status == query.status.value)
        if query.search:
            conditions.append(
                or_(
                    UserModel.email.icontains(query.search, autoescape=True),
                    UserModel.username.icontains(query.search, autoescape=True),
                    UserModel.first_name.icontains(query.search, autoescape=True),
                    UserModel.last_name.icontains(query.search, autoescape=True),
                )
            )
        if query.created_from is not None:
            conditions.append(FreelancerApplicationModel.created_at >= query.created_from)
        if query.created_to is not None:
            conditions.append(FreelancerApplicationModel.created_at <= query.created_to)
        return conditions
    
    def _ordering(self, query: ApplicationQuery) -> list:
        created = FreelancerApplicationModel.created_at
        if query.order.field == "status":
            rank = STATUS_RANK.desc() if query.order.descending else STATUS_RANK.asc()
            return [rank, created.desc()]
        return [created.desc() if query.order.descending else created.asc()]
    
    def _model_to_entity(self, model: FreelancerApplicationModel) -> FreelancerApplication:
        """Convert ORM model to domain entity."""
        applicant = None
        # Only read the relationship when it was eagerly loaded.
        if "user" not in inspect(model).unloaded and model.user is not None:
            applicant = ApplicantSummary(
                id=model.user.id,
                email=model.user.email,
                username=model.user.username,
                first_name=model.user.first_name,
                last_name=model.user.last_name,
            )
        
        return FreelancerApplication(
            id=model.id,
            user_id=model.user_id,
            status=ApplicationStatus(model.status),
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
            applicant=applicant,
        )
