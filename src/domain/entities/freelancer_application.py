"""Freelancer application entity and its review state machine."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.enums import ApplicationStatus


@dataclass(frozen=True)
class ApplicantSummary:
    """Public identity fields of the user behind an application."""

    id: UUID
    email: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass
class FreelancerApplication:
    """
    A buyer's request to be promoted to freelancer.

    There is at most one application per user. Re-applying re-opens the
    existing application instead of creating a new one.

    States:
        PENDING -> APPROVED | REJECTED
        APPROVED | REJECTED -> PENDING (via reopen)
    """

    id: UUID = field(default_factory=uuid4)
    user_id: UUID = field(default_factory=uuid4)
    status: ApplicationStatus = ApplicationStatus.PENDING
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    applicant: Optional[ApplicantSummary] = None

    def reopen(self, notes: Optional[str] = None) -> None:
        """Reset to PENDING from any state, overwriting notes."""
        self.status = ApplicationStatus.PENDING
        self.notes = notes
        self._mark_updated()

    def approve(self) -> None:
        self.status = ApplicationStatus.APPROVED
        self._mark_updated()

    def reject(self) -> None:
        self.status = ApplicationStatus.REJECTED
        self._mark_updated()

    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return f"FreelancerApplication(id={self.id}, status={self.status})"
