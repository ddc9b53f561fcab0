"""Design catalog entities."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Category:
    """A marketplace category, addressed by slug in filters."""

    id: UUID
    name: str
    slug: str


@dataclass
class Design:
    """
    A catalog entry buyers can browse, favorite and customize.

    Only published designs are ever exposed by the marketplace.
    """

    id: UUID = field(default_factory=uuid4)
    title: str = ""
    slug: str = ""
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    image_url: Optional[str] = None
    categories: list[Category] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    average_rating: float = 0.0
    review_count: int = 0
    is_published: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Validate catalog constraints."""
        if self.price < 0:
            raise ValueError("Price cannot be negative")
        if not 0 <= self.average_rating <= 5:
            raise ValueError("Average rating must be between 0 and 5")
        if self.review_count < 0:
            raise ValueError("Review count cannot be negative")
        self.tags = sorted({tag.strip().lower() for tag in self.tags if tag and tag.strip()})

    def __str__(self) -> str:
        return f"Design(id={self.id}, title={self.title})"


@dataclass(frozen=True)
class CatalogEntry:
    """A design enriched with the requesting user's favorite state."""

    design: Design
    is_favorite: bool
    favorites_count: int


@dataclass(frozen=True)
class FavoriteToggleResult:
    """Outcome of flipping a favorite."""

    is_favorite: bool
    favorites_count: int

    @property
    def message(self) -> str:
        return "Added to favorites." if self.is_favorite else "Removed from favorites."
