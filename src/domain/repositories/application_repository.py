"""Freelancer application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import FreelancerApplication
from domain.enums import ApplicationStatus
from domain.value_objects import ApplicationQuery, ListPage


class IApplicationRepository(ABC):
    """Abstract repository interface for FreelancerApplication entity."""
    
    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[FreelancerApplication]:
        """Retrieve an application by ID."""
        pass
    
    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[FreelancerApplication]:
        """Retrieve the application owned by a user."""
        pass
    
    @abstractmethod
    async def insert_pending(
        self,
        application: FreelancerApplication,
    ) -> tuple[FreelancerApplication, bool]:
        """
        Insert a new application in one conditional write keyed by user.
        
        When the user already owns a row (a concurrent first application),
        that row takes the new status and notes instead.
        
        Args:
            application: Freshly created application
            
        Returns:
            The stored application and whether a new row was created
        """
        pass
    
    @abstractmethod
    async def update(self, application: FreelancerApplication) -> FreelancerApplication:
        """Persist status and notes of an existing application."""
        pass
    
    @abstractmethod
    async def list(self, query: ApplicationQuery) -> ListPage[FreelancerApplication]:
        """List applications with their applicant summary."""
        pass
    
    @abstractmethod
    async def count_by_status(self, status: ApplicationStatus) -> int:
        """Count applications in a given status."""
        pass
