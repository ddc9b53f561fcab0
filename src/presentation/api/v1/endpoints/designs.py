"""Design endpoints."""

from uuid import UUID
from fastapi import APIRouter, Depends

from application.context import SessionContext
from application.use_cases import ToggleDesignFavoriteUseCase
from presentation.api.v1.dependencies import get_session_context, get_toggle_design_favorite_use_case
from presentation.api.v1.errors import to_http_error
from presentation.schemas import FavoriteToggleResponse
from infrastructure.config import get_logger

router = APIRouter(prefix="/designs", tags=["designs"])
logger = get_logger(__name__)


@router.post("/{design_id}/favorite", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    design_id: UUID,
    context: SessionContext = Depends(get_session_context),
    use_case: ToggleDesignFavoriteUseCase = Depends(get_toggle_design_favorite_use_case),
) -> FavoriteToggleResponse:
    """Add or remove the design from the caller's favorites."""
    try:
        result = await use_case.execute(context.user_id, design_id)
    except Exception as e:
        raise to_http_error(e, "Failed to update favorite.", logger)
    
    return FavoriteToggleResponse.from_result(result)
