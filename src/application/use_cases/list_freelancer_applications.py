"""Use Case for the admin freelancer application listing."""

from application.queries import ADMIN_DEFAULT_PAGE_SIZE
from domain.entities import FreelancerApplication
from domain.exceptions import DependencyFailureError
from domain.repositories import IApplicationRepository
from domain.value_objects import ApplicationQuery, ListPage
from infrastructure.config import get_logger


class ListFreelancerApplicationsUseCase:
    """Filtered, sorted, paginated applications with applicant summary."""
    
    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, query: ApplicationQuery) -> ListPage[FreelancerApplication]:
        try:
            return await self.application_repo.list(query)
        except DependencyFailureError as e:
            self.logger.error(f"❌ Application listing failed: {e}", exc_info=True)
            return ListPage(items=[], total=0, page=1, page_size=ADMIN_DEFAULT_PAGE_SIZE)
