"""User entity as seen by the marketplace core."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.enums import UserRole


@dataclass
class User:
    """
    Identity record of a marketplace participant.

    `role` and `is_admin` are independent axes: an admin can be a buyer or
    a freelancer at the same time. `is_deleted` is a deactivation flag, the
    row itself is never removed.
    """

    id: UUID = field(default_factory=uuid4)
    email: str = ""
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.BUYER
    is_admin: bool = False
    is_deleted: bool = False
    verified: bool = False
    date_joined: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_active(self) -> bool:
        return not self.is_deleted

    def change_role(self, role: UserRole) -> None:
        self.role = role
        self._mark_updated()

    def change_admin(self, is_admin: bool) -> None:
        self.is_admin = is_admin
        self._mark_updated()

    def change_active(self, active: bool) -> None:
        self.is_deleted = not active
        self._mark_updated()

    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
