"""Pytest configuration and shared fixtures."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from domain.entities import Design, FreelancerApplication, User
from domain.enums import ApplicationStatus, UserRole
from infrastructure.database import Base
from infrastructure.database import models  # noqa: F401


@pytest.fixture
def database_url(tmp_path):
    """File-backed SQLite database URL factory, fresh for every call."""
    counter = iter(range(1_000_000))
    return lambda: f"sqlite+aiosqlite:///{tmp_path / f'marketplace_{next(counter)}.db'}"


@pytest.fixture
def run_db(database_url):
    """
    Run an async scenario against a fresh database.
    
    The scenario receives an AsyncSession. Engine and event loop both live
    only for the duration of the call.
    """
    def runner(scenario, create_schema: bool = True):
        async def _run():
            engine = create_async_engine(database_url())
            try:
                if create_schema:
                    async with engine.begin() as conn:
                        await conn.run_sync(Base.metadata.create_all)
                session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
                async with session_maker() as session:
                    return await scenario(session)
            finally:
                await engine.dispose()
        
        return asyncio.run(_run())
    
    return runner


@pytest.fixture
def buyer():
    """Fixture for a plain buyer."""
    return User(
        email="ada@example.com",
        username="ada",
        first_name="Ada",
        last_name="Lovelace",
        role=UserRole.BUYER,
    )


@pytest.fixture
def pending_application(buyer):
    """Fixture for a freshly submitted application."""
    return FreelancerApplication(user_id=buyer.id, status=ApplicationStatus.PENDING, notes="Portfolio attached")


@pytest.fixture
def published_design():
    """Fixture for a published catalog design."""
    return Design(
        title="Sunset Horizon",
        slug="sunset-horizon",
        description="A vibrant gradient design inspired by beach sunsets.",
        tags=["Nature", "sunset", " Gradient "],
        average_rating=4.8,
        review_count=142,
        is_published=True,
    )
