"""Use Case for admin single-field user mutations."""

from typing import Callable
from uuid import UUID

from domain.entities import User
from domain.enums import UserRole
from domain.exceptions import NotFoundError, ValidationError
from domain.repositories import IUnitOfWork, IUserRepository
from infrastructure.config import get_logger


class UpdateUserUseCase:
    """
    Change one of role, admin flag or active flag of a user.
    
    Each mutator touches a single field. Demoting a freelancer leaves their
    application as it is.
    """
    
    def __init__(self, user_repository: IUserRepository, unit_of_work: IUnitOfWork):
        self.user_repo = user_repository
        self.uow = unit_of_work
        self.logger = get_logger(self.__class__.__name__)
    
    async def set_role(self, user_id: UUID, role: str) -> User:
        try:
            new_role = UserRole(role)
        except ValueError:
            raise ValidationError("Invalid role.")
        return await self._apply(user_id, lambda user: user.change_role(new_role))
    
    async def set_admin(self, user_id: UUID, is_admin: bool) -> User:
        return await self._apply(user_id, lambda user: user.change_admin(is_admin))
    
    async def set_active(self, user_id: UUID, active: bool) -> User:
        return await self._apply(user_id, lambda user: user.change_active(active))
    
    async def _apply(self, user_id: UUID, change: Callable[[User], None]) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        
        try:
            change(user)
            user = await self.user_repo.update(user)
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        
        self.logger.info(
            f"User {user_id} updated: role={user.role}, is_admin={user.is_admin}, "
            f"is_deleted={user.is_deleted}"
        )
        return user
