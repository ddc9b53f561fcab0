"""Use Case for submitting (or re-submitting) a freelancer application."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from application.services import FreelancerNotifier
from domain.entities import FreelancerApplication
from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository, IUnitOfWork, IUserRepository
from infrastructure.config import get_logger


@dataclass(frozen=True)
class ApplyResult:
    application: FreelancerApplication
    created: bool

    @property
    def message(self) -> str:
        return "Application submitted." if self.created else "Application updated to pending."


class ApplyForFreelancerUseCase:
    """Create the caller's application or re-open it as PENDING."""
    
    def __init__(
        self,
        user_repository: IUserRepository,
        application_repository: IApplicationRepository,
        unit_of_work: IUnitOfWork,
        notifier: FreelancerNotifier,
    ):
        self.user_repo = user_repository
        self.application_repo = application_repository
        self.uow = unit_of_work
        self.notifier = notifier
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, user_id: UUID, notes: Optional[str] = None) -> ApplyResult:
        """
        Upsert the application keyed by user.
        
        Whatever the previous status, the result is PENDING with the new
        notes. Never creates a second application for the same user.
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        
        try:
            application = await self.application_repo.get_by_user_id(user_id)
            if application is None:
                application, created = await self.application_repo.insert_pending(
                    FreelancerApplication(user_id=user_id, notes=notes)
                )
            else:
                application.reopen(notes)
                application = await self.application_repo.update(application)
                created = False
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        
        self.logger.info(
            f"📝 Freelancer application {'created' if created else 're-opened'} for user {user_id}"
        )
        await self.notifier.application_received(user)
        return ApplyResult(application=application, created=created)
