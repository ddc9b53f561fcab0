"""Dashboard endpoints: buyer marketplace and admin overview."""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from application.context import SessionContext
from application.queries import build_marketplace_query
from application.use_cases import GetAdminOverviewUseCase, ListMarketplaceDesignsUseCase
from presentation.api.v1.dependencies import (
    get_admin_overview_use_case,
    get_list_marketplace_designs_use_case,
    get_session_context,
    require_admin,
)
from presentation.schemas import AdminOverviewResponse, MarketplaceResponse
from infrastructure.config import get_logger

router = APIRouter(prefix="/dashboard", tags=["dashboard"])
logger = get_logger(__name__)


@router.get("/buyer/marketplace", response_model=MarketplaceResponse)
async def get_marketplace(
    q: Optional[str] = Query(None, description="Search in title and description"),
    category: Optional[str] = Query(None, description="Category slug or 'all'"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    sort: Optional[str] = Query(None, description="newest, priceAsc, priceDesc or rating"),
    context: SessionContext = Depends(get_session_context),
    use_case: ListMarketplaceDesignsUseCase = Depends(get_list_marketplace_designs_use_case),
) -> MarketplaceResponse:
    """List published designs. Malformed parameters fall back to defaults."""
    query = build_marketplace_query(q=q, category=category, page=page, page_size=page_size, sort=sort)
    result = await use_case.execute(context.user_id, query)
    return MarketplaceResponse.from_page(result)


@router.get("/admin/overview", response_model=AdminOverviewResponse)
async def get_admin_overview(
    _: SessionContext = Depends(require_admin),
    use_case: GetAdminOverviewUseCase = Depends(get_admin_overview_use_case),
) -> AdminOverviewResponse:
    """Aggregate counters for the admin dashboard."""
    overview = await use_case.execute()
    return AdminOverviewResponse.from_value(overview)
