"""Test helpers: row builders and notification doubles."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from application.interfaces import INotificationService
from application.services import FreelancerNotifier
from domain.exceptions import DependencyFailureError
from infrastructure.database.models import (
    CategoryModel,
    DesignFavoriteModel,
    DesignModel,
    FreelancerApplicationModel,
    UserModel,
)

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)
DASHBOARD_URL = "http://localhost:5173/freelancer"


def at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


async def add_user(
    session: AsyncSession,
    email: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    username: Optional[str] = None,
    role: str = "BUYER",
    is_admin: bool = False,
    is_deleted: bool = False,
    date_joined: Optional[datetime] = None,
) -> UserModel:
    user = UserModel(
        email=email,
        username=username or email.split("@")[0],
        first_name=first_name,
        last_name=last_name,
        role=role,
        is_admin=is_admin,
        is_deleted=is_deleted,
        verified=True,
        date_joined=date_joined or BASE_TIME,
    )
    session.add(user)
    await session.flush()
    return user


async def add_category(session: AsyncSession, name: str, slug: str) -> CategoryModel:
    category = CategoryModel(name=name, slug=slug)
    session.add(category)
    await session.flush()
    return category


async def add_design(
    session: AsyncSession,
    title: str,
    description: str = "",
    price: str = "20.00",
    categories: Optional[list[CategoryModel]] = None,
    average_rating: float = 0.0,
    review_count: int = 0,
    is_published: bool = True,
    created_at: Optional[datetime] = None,
) -> DesignModel:
    design = DesignModel(
        slug=title.lower().replace(" ", "-"),
        title=title,
        description=description,
        price=Decimal(price),
        tags=[],
        categories=categories or [],
        average_rating=average_rating,
        review_count=review_count,
        is_published=is_published,
        created_at=created_at or BASE_TIME,
    )
    session.add(design)
    await session.flush()
    return design


async def add_favorite(session: AsyncSession, design: DesignModel, user: UserModel) -> None:
    session.add(DesignFavoriteModel(design_id=design.id, user_id=user.id))
    await session.flush()


async def add_application(
    session: AsyncSession,
    user: UserModel,
    status: str = "PENDING",
    notes: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> FreelancerApplicationModel:
    application = FreelancerApplicationModel(
        user_id=user.id,
        status=status,
        notes=notes,
        created_at=created_at or BASE_TIME,
        updated_at=created_at or BASE_TIME,
    )
    session.add(application)
    await session.flush()
    return application


class RecordingNotificationService(INotificationService):
    """Keeps every message instead of sending it."""
    
    def __init__(self):
        self.sent: list[dict] = []
    
    async def send(self, to: str, subject: str, html: str) -> None:
        self.sent.append({"to": to, "subject": subject, "html": html})


class FailingNotificationService(INotificationService):
    """Simulates an unreachable mail server."""
    
    def __init__(self):
        self.attempts = 0
    
    async def send(self, to: str, subject: str, html: str) -> None:
        self.attempts += 1
        raise DependencyFailureError("SMTP server unreachable")


def make_notifier(service: INotificationService) -> FreelancerNotifier:
    return FreelancerNotifier(service, DASHBOARD_URL)


async def persist(session: AsyncSession) -> None:
    """Commit seeded rows and detach them so use cases read fresh state."""
    await session.commit()
    session.expunge_all()
