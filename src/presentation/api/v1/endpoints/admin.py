"""Admin endpoints: freelancer moderation and user directory."""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query

from application.queries import build_application_query, build_user_query
from application.use_cases import (
    ApproveFreelancerApplicationUseCase,
    ListFreelancerApplicationsUseCase,
    ListUsersUseCase,
    RejectFreelancerApplicationUseCase,
    UpdateUserUseCase,
)
from presentation.api.v1.dependencies import (
    get_approve_application_use_case,
    get_list_applications_use_case,
    get_list_users_use_case,
    get_reject_application_use_case,
    get_update_user_use_case,
    require_admin,
)
from presentation.api.v1.errors import to_http_error
from presentation.schemas import (
    ApplicationListResponse,
    MessageResponse,
    SetActiveRequest,
    SetAdminRequest,
    SetRoleRequest,
    UserListResponse,
)
from infrastructure.config import get_logger

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])
logger = get_logger(__name__)


# Freelancer applications

@router.get("/freelancers/applications", response_model=ApplicationListResponse)
async def list_freelancer_applications(
    status: Optional[str] = Query(None, description="PENDING, APPROVED, REJECTED or all"),
    q: Optional[str] = Query(None, description="Search applicant email, username or name"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_dir: Optional[str] = Query(None, alias="sortDir"),
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    use_case: ListFreelancerApplicationsUseCase = Depends(get_list_applications_use_case),
) -> ApplicationListResponse:
    """List applications. Malformed parameters fall back to defaults."""
    query = build_application_query(
        status=status,
        q=q,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_dir=sort_dir,
        date_from=date_from,
        date_to=date_to,
    )
    result = await use_case.execute(query)
    return ApplicationListResponse.from_page(result)


@router.post("/freelancers/{application_id}/approve", response_model=MessageResponse)
async def approve_freelancer(
    application_id: UUID,
    use_case: ApproveFreelancerApplicationUseCase = Depends(get_approve_application_use_case),
) -> MessageResponse:
    """Approve an application and promote the applicant to freelancer."""
    try:
        await use_case.execute(application_id)
    except Exception as e:
        raise to_http_error(e, "Failed to approve application.", logger)
    
    return MessageResponse(message="Application approved.")


@router.post("/freelancers/{application_id}/reject", response_model=MessageResponse)
async def reject_freelancer(
    application_id: UUID,
    use_case: RejectFreelancerApplicationUseCase = Depends(get_reject_application_use_case),
) -> MessageResponse:
    """Reject an application."""
    try:
        await use_case.execute(application_id)
    except Exception as e:
        raise to_http_error(e, "Failed to reject application.", logger)
    
    return MessageResponse(message="Application rejected.")


# Users

@router.get("/users", response_model=UserListResponse)
async def list_users(
    q: Optional[str] = Query(None, description="Search email, username or name"),
    role: Optional[str] = Query(None, description="BUYER or FREELANCER"),
    admin: Optional[str] = Query(None, description="true, false or all"),
    active: Optional[str] = Query(None, description="true, false or all"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_dir: Optional[str] = Query(None, alias="sortDir"),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> UserListResponse:
    """List users. Malformed parameters fall back to defaults."""
    query = build_user_query(
        q=q,
        role=role,
        admin=admin,
        active=active,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_dir=sort_dir,
    )
    result = await use_case.execute(query)
    return UserListResponse.from_page(result)


@router.patch("/users/{user_id}/role", response_model=MessageResponse)
async def update_user_role(
    user_id: UUID,
    request: SetRoleRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> MessageResponse:
    try:
        await use_case.set_role(user_id, request.role)
    except Exception as e:
        raise to_http_error(e, "Failed to update user role.", logger)
    
    return MessageResponse(message="User role updated.")


@router.patch("/users/{user_id}/admin", response_model=MessageResponse)
async def set_user_admin(
    user_id: UUID,
    request: SetAdminRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> MessageResponse:
    try:
        await use_case.set_admin(user_id, request.is_admin)
    except Exception as e:
        raise to_http_error(e, "Failed to update admin flag.", logger)
    
    return MessageResponse(message="Admin flag updated.")


@router.patch("/users/{user_id}/active", response_model=MessageResponse)
async def set_user_active(
    user_id: UUID,
    request: SetActiveRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> MessageResponse:
    try:
        await use_case.set_active(user_id, request.active)
    except Exception as e:
        raise to_http_error(e, "Failed to update user status.", logger)
    
    return MessageResponse(message="User reactivated." if request.active else "User deactivated.")
