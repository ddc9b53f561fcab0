"""Freelancer application endpoints for the applicant."""

from typing import Optional
from fastapi import APIRouter, Body, Depends, Response, status

from application.context import SessionContext
from application.queries.normalization import clean_text
from application.use_cases import ApplyForFreelancerUseCase, GetMyApplicationUseCase
from domain.exceptions import DependencyFailureError
from presentation.api.v1.dependencies import (
    get_apply_for_freelancer_use_case,
    get_my_application_use_case,
    get_session_context,
)
from presentation.api.v1.errors import to_http_error
from presentation.schemas import (
    ApplicationResponse,
    ApplyRequest,
    ApplyResponse,
    MyApplicationResponse,
)
from infrastructure.config import get_logger

router = APIRouter(prefix="/freelancers", tags=["freelancers"])
logger = get_logger(__name__)


@router.post("/apply", response_model=ApplyResponse, status_code=status.HTTP_201_CREATED)
async def apply_for_freelancer(
    response: Response,
    request: Optional[ApplyRequest] = Body(None),
    context: SessionContext = Depends(get_session_context),
    use_case: ApplyForFreelancerUseCase = Depends(get_apply_for_freelancer_use_case),
) -> ApplyResponse:
    """Submit an application, or re-open an existing one as PENDING."""
    notes = clean_text(request.notes) if request else None
    try:
        result = await use_case.execute(context.user_id, notes)
    except Exception as e:
        raise to_http_error(e, "Failed to submit application.", logger)
    
    if not result.created:
        response.status_code = status.HTTP_200_OK
    
    return ApplyResponse(
        message=result.message,
        application=ApplicationResponse.from_entity(result.application),
    )


@router.get("/application", response_model=MyApplicationResponse)
async def get_my_application(
    context: SessionContext = Depends(get_session_context),
    use_case: GetMyApplicationUseCase = Depends(get_my_application_use_case),
) -> MyApplicationResponse:
    """Return the caller's application status, NONE if they never applied."""
    try:
        result = await use_case.execute(context.user_id)
    except DependencyFailureError as e:
        raise to_http_error(e, "Failed to fetch application.", logger)
    
    return MyApplicationResponse(
        status=result.status,
        application=ApplicationResponse.from_entity(result.application) if result.application else None,
    )
