"""Freelancer application SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class FreelancerApplicationModel(Base):
    """SQLAlchemy model for freelancer applications (one per user)."""
    
    __tablename__ = "freelancer_applications"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4
    )
    
    # Owner; unique so re-applying updates instead of inserting
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True
    )
    
    status: Mapped[str] = mapped_column(String(20), default="PENDING", nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )
    
    user: Mapped["UserModel"] = relationship("UserModel", back_populates="application")
    
    def __repr__(self) -> str:
        return f"<FreelancerApplicationModel(id={self.id}, status={self.status})>"
