"""Admin user directory Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.entities import User
from domain.enums import UserRole
from domain.value_objects import ListPage
from presentation.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    email: str
    role: UserRole
    is_admin: bool
    verified: bool
    is_deleted: bool
    date_joined: datetime
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            username=user.username,
            email=user.email,
            role=user.role,
            is_admin=user.is_admin,
            verified=user.verified,
            is_deleted=user.is_deleted,
            date_joined=user.date_joined,
            updated_at=user.updated_at,
        )


class UserListResponse(CamelModel):
    users: list[UserResponse]
    total: int
    page: int
    page_size: int
    
    @classmethod
    def from_page(cls, page: ListPage[User]) -> "UserListResponse":
        return cls(
            users=[UserResponse.from_entity(u) for u in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )


class SetRoleRequest(CamelModel):
    role: str


class SetAdminRequest(CamelModel):
    is_admin: bool


class SetActiveRequest(CamelModel):
    active: bool
