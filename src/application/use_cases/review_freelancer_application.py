"""Use Cases for admin review of freelancer applications."""

from uuid import UUID

from application.services import FreelancerNotifier
from domain.entities import FreelancerApplication, User
from domain.enums import UserRole
from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository, IUnitOfWork, IUserRepository
from infrastructure.config import get_logger


class _ReviewApplicationUseCase:
    """Shared lookup for approve/reject."""
    
    def __init__(
        self,
        application_repository: IApplicationRepository,
        user_repository: IUserRepository,
        unit_of_work: IUnitOfWork,
        notifier: FreelancerNotifier,
    ):
        self.application_repo = application_repository
        self.user_repo = user_repository
        self.uow = unit_of_work
        self.notifier = notifier
        self.logger = get_logger(self.__class__.__name__)
    
    async def _load(self, application_id: UUID) -> tuple[FreelancerApplication, User]:
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("FreelancerApplication", application_id)
        
        user = await self.user_repo.get_by_id(application.user_id)
        if user is None:
            raise NotFoundError("User", application.user_id)
        
        return application, user


class ApproveFreelancerApplicationUseCase(_ReviewApplicationUseCase):
    """
    Approve an application and promote its owner to FREELANCER.
    
    Both writes share one transaction: the status is written first, the
    role second, and neither is kept if either fails.
    """
    
    async def execute(self, application_id: UUID) -> FreelancerApplication:
        application, user = await self._load(application_id)
        
        try:
            application.approve()
            application = await self.application_repo.update(application)
            user.change_role(UserRole.FREELANCER)
            user = await self.user_repo.update(user)
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        
        self.logger.info(f"✅ Application {application_id} approved, user {user.id} is now a freelancer")
        await self.notifier.application_approved(user)
        return application


class RejectFreelancerApplicationUseCase(_ReviewApplicationUseCase):
    """Reject an application. The owner's role is left untouched."""
    
    async def execute(self, application_id: UUID) -> FreelancerApplication:
        application, user = await self._load(application_id)
        
        try:
            application.reject()
            application = await self.application_repo.update(application)
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        
        self.logger.info(f"Application {application_id} rejected")
        await self.notifier.application_rejected(user)
        return application
