"""SQLAlchemy implementation of the unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.repositories import IUnitOfWork
from infrastructure.database.errors import translate_db_errors


class SQLAlchemyUnitOfWork(IUnitOfWork):
    """Commits or rolls back the request session's transaction."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    @translate_db_errors
    async def commit(self) -> None:
        await self.session.commit()
    
    @translate_db_errors
    async def rollback(self) -> None:
        await self.session.rollback()
