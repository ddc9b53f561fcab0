"""Use Case for the admin user directory listing."""

from application.queries import ADMIN_DEFAULT_PAGE_SIZE
from domain.entities import User
from domain.exceptions import DependencyFailureError
from domain.repositories import IUserRepository
from domain.value_objects import ListPage, UserQuery
from infrastructure.config import get_logger


class ListUsersUseCase:
    """Filtered, sorted, paginated users."""
    
    def __init__(self, user_repository: IUserRepository):
        self.user_repo = user_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, query: UserQuery) -> ListPage[User]:
        try:
            return await self.user_repo.list(query)
        except DependencyFailureError as e:
            self.logger.error(f"❌ User listing failed: {e}", exc_info=True)
            return ListPage(items=[], total=0, page=1, page_size=ADMIN_DEFAULT_PAGE_SIZE)
