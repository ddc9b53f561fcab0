"""Use Case for the admin dashboard counters."""

from domain.enums import ApplicationStatus
from domain.exceptions import DependencyFailureError
from domain.repositories import IApplicationRepository, IDesignRepository, IUserRepository
from domain.value_objects import AdminOverview
from infrastructure.config import get_logger


class GetAdminOverviewUseCase:
    """Count users, approved freelancers, published designs and pending approvals."""
    
    def __init__(
        self,
        user_repository: IUserRepository,
        application_repository: IApplicationRepository,
        design_repository: IDesignRepository,
    ):
        self.user_repo = user_repository
        self.application_repo = application_repository
        self.design_repo = design_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self) -> AdminOverview:
        try:
            return AdminOverview(
                users=await self.user_repo.count(),
                freelancers=await self.application_repo.count_by_status(ApplicationStatus.APPROVED),
                designs=await self.design_repo.count_published(),
                pending_approvals=await self.application_repo.count_by_status(ApplicationStatus.PENDING),
            )
        except DependencyFailureError as e:
            self.logger.error(f"❌ Admin overview failed: {e}", exc_info=True)
            return AdminOverview()
