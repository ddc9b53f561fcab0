"""Design catalog SQLAlchemy models."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Table,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


design_categories = Table(
    "design_categories",
    Base.metadata,
    Column("design_id", Uuid, ForeignKey("designs.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Uuid, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class CategoryModel(Base):
    """SQLAlchemy model for marketplace categories."""
    
    __tablename__ = "categories"
    
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    
    def __repr__(self) -> str:
        return f"<CategoryModel(slug={self.slug})>"


class DesignModel(Base):
    """SQLAlchemy model for catalog designs."""
    
    __tablename__ = "designs"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    # Catalog data
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    
    # Aggregates
    average_rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    review_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    
    # Status
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    
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
    
    categories: Mapped[list["CategoryModel"]] = relationship(
        "CategoryModel",
        secondary=design_categories,
        order_by="CategoryModel.name",
    )
    
    def __repr__(self) -> str:
        return f"<DesignModel(id={self.id}, slug={self.slug})>"


class DesignFavoriteModel(Base):
    """Join row: existence means the user favorited the design."""
    
    __tablename__ = "design_favorites"
    
    design_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("designs.id", ondelete="CASCADE"),
        primary_key=True
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<DesignFavoriteModel(design_id={self.design_id}, user_id={self.user_id})>"
