"""FastAPI dependency injection setup."""

from typing import AsyncGenerator, Optional
from uuid import UUID
from fastapi import BackgroundTasks, Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from application.context import SessionContext
from application.interfaces import INotificationService
from application.services import FreelancerNotifier
from application.use_cases import (
    ApplyForFreelancerUseCase,
    ApproveFreelancerApplicationUseCase,
    GetAdminOverviewUseCase,
    GetMyApplicationUseCase,
    ListFreelancerApplicationsUseCase,
    ListMarketplaceDesignsUseCase,
    ListUsersUseCase,
    RejectFreelancerApplicationUseCase,
    ToggleDesignFavoriteUseCase,
    UpdateUserUseCase,
)
from domain.exceptions import UnauthorizedError
from infrastructure.config import get_settings
from infrastructure.database import SQLAlchemyUnitOfWork, get_session
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyDesignRepository,
    SQLAlchemyFavoriteRepository,
    SQLAlchemyUserRepository,
)
from infrastructure.notifications import BackgroundNotificationService, SMTPNotificationService


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Identity context
def _parse_context(user_id: Optional[str], is_admin: Optional[str]) -> SessionContext:
    if not user_id:
        raise UnauthorizedError("Missing user context.")
    try:
        parsed_id = UUID(user_id.strip())
    except ValueError:
        raise UnauthorizedError("Invalid user context.")
    return SessionContext(
        user_id=parsed_id,
        is_admin=(is_admin or "").strip().lower() == "true",
    )


def get_session_context(
    x_user_id: Optional[str] = Header(None, description="Authenticated user id set by the auth gateway"),
    x_user_is_admin: Optional[str] = Header(None, description="'true' when the caller is a verified admin"),
) -> SessionContext:
    """Build the caller's context from headers forwarded by the auth layer."""
    try:
        return _parse_context(x_user_id, x_user_is_admin)
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def require_admin(context: SessionContext = Depends(get_session_context)) -> SessionContext:
    """Reject callers without the admin flag."""
    if not context.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required.")
    return context


# Notification dependencies
def get_notification_service(background_tasks: BackgroundTasks) -> INotificationService:
    """E-mails are delivered after the response has been sent."""
    return BackgroundNotificationService(background_tasks, SMTPNotificationService())


def get_freelancer_notifier(
    notification_service: INotificationService = Depends(get_notification_service),
) -> FreelancerNotifier:
    return FreelancerNotifier(notification_service, get_settings().freelancer_dashboard_url)


# Use case dependencies
def get_list_marketplace_designs_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> ListMarketplaceDesignsUseCase:
    return ListMarketplaceDesignsUseCase(
        design_repository=SQLAlchemyDesignRepository(session),
        favorite_repository=SQLAlchemyFavoriteRepository(session),
    )


def get_toggle_design_favorite_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> ToggleDesignFavoriteUseCase:
    return ToggleDesignFavoriteUseCase(
        design_repository=SQLAlchemyDesignRepository(session),
        favorite_repository=SQLAlchemyFavoriteRepository(session),
        unit_of_work=SQLAlchemyUnitOfWork(session),
    )


def get_apply_for_freelancer_use_case(
    session: AsyncSession = Depends(get_db_session),
    notifier: FreelancerNotifier = Depends(get_freelancer_notifier),
) -> ApplyForFreelancerUseCase:
    return ApplyForFreelancerUseCase(
        user_repository=SQLAlchemyUserRepository(session),
        application_repository=SQLAlchemyApplicationRepository(session),
        unit_of_work=SQLAlchemyUnitOfWork(session),
        notifier=notifier,
    )


def get_my_application_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> GetMyApplicationUseCase:
    return GetMyApplicationUseCase(SQLAlchemyApplicationRepository(session))


def get_approve_application_use_case(
    session: AsyncSession = Depends(get_db_session),
    notifier: FreelancerNotifier = Depends(get_freelancer_notifier),
) -> ApproveFreelancerApplicationUseCase:
    return ApproveFreelancerApplicationUseCase(
        application_repository=SQLAlchemyApplicationRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
        unit_of_work=SQLAlchemyUnitOfWork(session),
        notifier=notifier,
    )


def get_reject_application_use_case(
    session: AsyncSession = Depends(get_db_session),
    notifier: FreelancerNotifier = Depends(get_freelancer_notifier),
) -> RejectFreelancerApplicationUseCase:
    return RejectFreelancerApplicationUseCase(
        application_repository=SQLAlchemyApplicationRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
        unit_of_work=SQLAlchemyUnitOfWork(session),
        notifier=notifier,
    )


def get_list_applications_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> ListFreelancerApplicationsUseCase:
    return ListFreelancerApplicationsUseCase(SQLAlchemyApplicationRepository(session))


def get_list_users_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> ListUsersUseCase:
    return ListUsersUseCase(SQLAlchemyUserRepository(session))


def get_update_user_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(
        user_repository=SQLAlchemyUserRepository(session),
        unit_of_work=SQLAlchemyUnitOfWork(session),
    )


def get_admin_overview_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> GetAdminOverviewUseCase:
    return GetAdminOverviewUseCase(
        user_repository=SQLAlchemyUserRepository(session),
        application_repository=SQLAlchemyApplicationRepository(session),
        design_repository=SQLAlchemyDesignRepository(session),
    )
