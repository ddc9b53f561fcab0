"""Marketplace and favorite Pydantic schemas."""

from decimal import Decimal
from typing import Optional
from uuid import UUID
from pydantic import Field

from domain.entities import CatalogEntry, Category, FavoriteToggleResult
from domain.value_objects import AdminOverview, MarketplacePage, Pagination
from presentation.schemas.base import CamelModel


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    slug: str
    
    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name, slug=category.slug)


class PaginationResponse(CamelModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    
    @classmethod
    def from_value(cls, pagination: Pagination) -> "PaginationResponse":
        return cls(
            page=pagination.page,
            page_size=pagination.page_size,
            total=pagination.total,
            total_pages=pagination.total_pages,
        )


class DesignCardResponse(CamelModel):
    """A design as shown on a marketplace card."""
    
    id: UUID
    title: str
    description: Optional[str] = None
    price: Decimal
    image_url: Optional[str] = None
    average_rating: float
    review_count: int
    categories: list[CategoryResponse]
    tags: list[str]
    is_favorite: bool = Field(..., description="Whether the caller favorited this design")
    favorites_count: int = Field(..., description="Number of users who favorited this design")
    
    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "DesignCardResponse":
        design = entry.design
        return cls(
            id=design.id,
            title=design.title,
            description=design.description,
            price=design.price,
            image_url=design.image_url,
            average_rating=design.average_rating,
            review_count=design.review_count,
            categories=[CategoryResponse.from_entity(c) for c in design.categories],
            tags=design.tags,
            is_favorite=entry.is_favorite,
            favorites_count=entry.favorites_count,
        )


class MarketplaceResponse(CamelModel):
    """Response schema for the marketplace listing."""
    
    designs: list[DesignCardResponse]
    available_categories: list[CategoryResponse]
    pagination: PaginationResponse
    
    @classmethod
    def from_page(cls, page: MarketplacePage) -> "MarketplaceResponse":
        return cls(
            designs=[DesignCardResponse.from_entry(entry) for entry in page.designs],
            available_categories=[
                CategoryResponse.from_entity(c) for c in page.available_categories
            ],
            pagination=PaginationResponse.from_value(page.pagination),
        )


class FavoriteToggleResponse(CamelModel):
    """Response schema for a favorite toggle."""
    
    message: str
    is_favorite: bool
    favorites_count: int
    
    @classmethod
    def from_result(cls, result: FavoriteToggleResult) -> "FavoriteToggleResponse":
        return cls(
            message=result.message,
            is_favorite=result.is_favorite,
            favorites_count=result.favorites_count,
        )


class AdminOverviewResponse(CamelModel):
    """Counters for the admin dashboard."""
    
    users: int
    freelancers: int
    designs: int
    pending_approvals: int
    
    @classmethod
    def from_value(cls, overview: AdminOverview) -> "AdminOverviewResponse":
        return cls(
            users=overview.users,
            freelancers=overview.freelancers,
            designs=overview.designs,
            pending_approvals=overview.pending_approvals,
        )
