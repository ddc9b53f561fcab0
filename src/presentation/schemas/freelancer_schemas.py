"""Freelancer application Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field

from domain.entities import ApplicantSummary, FreelancerApplication
from domain.enums import ApplicationStatus
from domain.value_objects import ListPage
from presentation.schemas.base import CamelModel


class ApplyRequest(CamelModel):
    """Request schema for applying as a freelancer."""
    
    notes: Optional[str] = Field(
        None,
        description="Free text from the applicant",
        max_length=5000
    )
    
    model_config = {
        **CamelModel.model_config,
        "json_schema_extra": {
            "examples": [
                {"notes": "I have five years of experience in screen printing."}
            ]
        },
    }


class ApplicantResponse(CamelModel):
    id: UUID
    email: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    
    @classmethod
    def from_entity(cls, applicant: ApplicantSummary) -> "ApplicantResponse":
        return cls(
            id=applicant.id,
            email=applicant.email,
            username=applicant.username,
            first_name=applicant.first_name,
            last_name=applicant.last_name,
        )


class ApplicationResponse(CamelModel):
    id: UUID
    user_id: UUID
    status: ApplicationStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    user: Optional[ApplicantResponse] = None
    
    @classmethod
    def from_entity(cls, application: FreelancerApplication) -> "ApplicationResponse":
        return cls(
            id=application.id,
            user_id=application.user_id,
            status=application.status,
            notes=application.notes,
            created_at=application.created_at,
            updated_at=application.updated_at,
            user=ApplicantResponse.from_entity(application.applicant) if application.applicant else None,
        )


class ApplyResponse(CamelModel):
    message: str
    application: ApplicationResponse


class MyApplicationResponse(CamelModel):
    """Caller's application, or status NONE."""
    
    status: str = Field(..., description="NONE, PENDING, APPROVED or REJECTED")
    application: Optional[ApplicationResponse] = None


class ApplicationListResponse(CamelModel):
    applications: list[ApplicationResponse]
    total: int
    page: int
    page_size: int
    
    @classmethod
    def from_page(cls, page: ListPage[FreelancerApplication]) -> "ApplicationListResponse":
        return cls(
            applications=[ApplicationResponse.from_entity(a) for a in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )
