"""Use Case for reading the caller's own freelancer application."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.entities import FreelancerApplication
from domain.repositories import IApplicationRepository

NO_APPLICATION = "NONE"


@dataclass(frozen=True)
class MyApplication:
    status: str
    application: Optional[FreelancerApplication] = None


class GetMyApplicationUseCase:
    """Report NONE when the user never applied, else the application."""
    
    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
    
    async def execute(self, user_id: UUID) -> MyApplication:
        application = await self.application_repo.get_by_user_id(user_id)
        if application is None:
            return MyApplication(status=NO_APPLICATION)
        return MyApplication(status=application.status.value, application=application)
