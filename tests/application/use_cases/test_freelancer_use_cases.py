"""Tests for freelancer application submission and review."""

from datetime import datetime
from uuid import uuid4

import pytest
from application.queries import build_application_query
from application.use_cases import (
    NO_APPLICATION,
    ApplyForFreelancerUseCase,
    ApproveFreelancerApplicationUseCase,
    GetMyApplicationUseCase,
    ListFreelancerApplicationsUseCase,
    RejectFreelancerApplicationUseCase,
)
from domain.enums import ApplicationStatus, UserRole
from domain.exceptions import DependencyFailureError, NotFoundError
from infrastructure.database import SQLAlchemyUnitOfWork
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyUserRepository,
)
from support import (
    FailingNotificationService,
    RecordingNotificationService,
    add_application,
    add_user,
    at,
    make_notifier,
    persist,
)


def apply_use_case(session, notifications) -> ApplyForFreelancerUseCase:
    return ApplyForFreelancerUseCase(
        SQLAlchemyUserRepository(session),
        SQLAlchemyApplicationRepository(session),
        SQLAlchemyUnitOfWork(session),
        make_notifier(notifications),
    )


def review_use_case(cls, session, notifications, user_repository=None):
    return cls(
        SQLAlchemyApplicationRepository(session),
        user_repository or SQLAlchemyUserRepository(session),
        SQLAlchemyUnitOfWork(session),
        make_notifier(notifications),
    )


async def reload_state(session, user_id):
    """Status and role as stored, bypassing the identity map."""
    session.expunge_all()
    application = await SQLAlchemyApplicationRepository(session).get_by_user_id(user_id)
    user = await SQLAlchemyUserRepository(session).get_by_id(user_id)
    return application, user


class TestApplyForFreelancer:
    """Test ApplyForFreelancerUseCase."""

    def test_first_application_is_created_pending(self, run_db):
        notifications = RecordingNotificationService()

        async def scenario(session):
            user = await add_user(session, "ada@example.com", first_name="Ada")
            await persist(session)
            result = await apply_use_case(session, notifications).execute(user.id, "My portfolio")
            return result, await reload_state(session, user.id)

        result, (application, user) = run_db(scenario)

        assert result.created is True
        assert result.message == "Application submitted."
        assert application.status == ApplicationStatus.PENDING
        assert application.notes == "My portfolio"
        assert user.role == UserRole.BUYER
        assert len(notifications.sent) == 1
        assert notifications.sent[0]["to"] == "ada@example.com"
        assert notifications.sent[0]["subject"] == "We received your freelancer application"
        assert "Hi Ada," in notifications.sent[0]["html"]

    def test_applying_twice_keeps_one_application(self, run_db):
        notifications = RecordingNotificationService()

        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            await persist(session)
            use_case = apply_use_case(session, notifications)
            first = await use_case.execute(user.id, "first")
            second = await use_case.execute(user.id, "second")
            return first, second

        first, second = run_db(scenario)

        assert first.application.id == second.application.id
        assert second.created is False
        assert second.message == "Application updated to pending."
        assert second.application.status == ApplicationStatus.PENDING
        assert second.application.notes == "second"
        assert len(notifications.sent) == 2

    def test_reapplying_after_rejection_resets_to_pending(self, run_db):
        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            await add_application(session, user, status="REJECTED", notes="old notes")
            await persist(session)
            result = await apply_use_case(session, RecordingNotificationService()).execute(user.id)
            return result, await reload_state(session, user.id)

        result, (application, _) = run_db(scenario)

        assert result.created is False
        assert application.status == ApplicationStatus.PENDING
        assert application.notes is None

    def test_reapplying_keeps_identity_and_touches_updated_at(self, run_db):
        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            original = await add_application(session, user, status="APPROVED", created_at=at(0))
            await persist(session)
            await apply_use_case(session, RecordingNotificationService()).execute(user.id, "again")
            application, _ = await reload_state(session, user.id)
            return original, application

        original, application = run_db(scenario)

        assert application.id == original.id
        assert application.created_at == at(0)
        assert application.updated_at > at(0)
        assert application.notes == "again"

    def test_notification_failure_does_not_undo_application(self, run_db):
        notifications = FailingNotificationService()

        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            await persist(session)
            result = await apply_use_case(session, notifications).execute(user.id, "notes")
            return result, await reload_state(session, user.id)

        result, (application, _) = run_db(scenario)

        assert notifications.attempts == 1
        assert result.created is True
        assert application.status == ApplicationStatus.PENDING

    def test_unknown_user_is_not_found(self, run_db):
        async def scenario(session):
            await apply_use_case(session, RecordingNotificationService()).execute(uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            run_db(scenario)
        assert exc_info.value.entity == "User"


class TestGetMyApplication:
    """Test GetMyApplicationUseCase."""

    def test_none_when_never_applied(self, run_db):
        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            await persist(session)
            return await GetMyApplicationUseCase(SQLAlchemyApplicationRepository(session)).execute(user.id)

        mine = run_db(scenario)

        assert mine.status == NO_APPLICATION
        assert mine.application is None

    def test_returns_current_status(self, run_db):
        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            await add_application(session, user, status="APPROVED", notes="hi")
            await persist(session)
            return await GetMyApplicationUseCase(SQLAlchemyApplicationRepository(session)).execute(user.id)

        mine = run_db(scenario)

        assert mine.status == "APPROVED"
        assert mine.application.notes == "hi"


class TestReviewApplication:
    """Test approve and reject."""

    def test_approve_promotes_user(self, run_db):
        notifications = RecordingNotificationService()

        async def scenario(session):
            user = await add_user(session, "ada@example.com", first_name="Ada")
            pending = await add_application(session, user)
            await persist(session)
            use_case = review_use_case(ApproveFreelancerApplicationUseCase, session, notifications)
            result = await use_case.execute(pending.id)
            return result, await reload_state(session, user.id)

        result, (application, user) = run_db(scenario)

        assert result.status == ApplicationStatus.APPROVED
        assert application.status == ApplicationStatus.APPROVED
        assert user.role == UserRole.FREELANCER
        assert notifications.sent[0]["subject"] == "Your freelancer account is verified"
        assert "http://localhost:5173/freelancer" in notifications.sent[0]["html"]

    def test_reject_leaves_role_unchanged(self, run_db):
        notifications = RecordingNotificationService()

        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            pending = await add_application(session, user)
            await persist(session)
            use_case = review_use_case(RejectFreelancerApplicationUseCase, session, notifications)
            await use_case.execute(pending.id)
            return await reload_state(session, user.id)

        application, user = run_db(scenario)

        assert application.status == ApplicationStatus.REJECTED
        assert user.role == UserRole.BUYER
        assert notifications.sent[0]["subject"] == "Your freelancer application status"

    def test_approve_survives_notification_failure(self, run_db):
        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            pending = await add_application(session, user)
            await persist(session)
            use_case = review_use_case(
                ApproveFreelancerApplicationUseCase, session, FailingNotificationService()
            )
            await use_case.execute(pending.id)
            return await reload_state(session, user.id)

        application, user = run_db(scenario)

        assert application.status == ApplicationStatus.APPROVED
        assert user.role == UserRole.FREELANCER

    def test_failed_promotion_rolls_back_status(self, run_db):
        class BrokenUserRepository(SQLAlchemyUserRepository):
            async def update(self, user):
                raise DependencyFailureError("users table locked")

        async def scenario(session):
            user = await add_user(session, "ada@example.com")
            pending = await add_application(session, user)
            await persist(session)
            use_case = review_use_case(
                ApproveFreelancerApplicationUseCase,
                session,
                RecordingNotificationService(),
                user_repository=BrokenUserRepository(session),
            )
            with pytest.raises(DependencyFailureError):
                await use_case.execute(pending.id)
            return await reload_state(session, user.id)

        application, user = run_db(scenario)

        assert application.status == ApplicationStatus.PENDING
        assert user.role == UserRole.BUYER

    @pytest.mark.parametrize(
        "use_case_cls", [ApproveFreelancerApplicationUseCase, RejectFreelancerApplicationUseCase]
    )
    def test_unknown_application_is_not_found(self, run_db, use_case_cls):
        notifications = RecordingNotificationService()

        async def scenario(session):
            await review_use_case(use_case_cls, session, notifications).execute(uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            run_db(scenario)
        assert exc_info.value.entity == "FreelancerApplication"
        assert notifications.sent == []


async def seed_applications(session):
    ada = await add_user(session, "ada@example.com", first_name="Ada", last_name="Lovelace")
    alan = await add_user(session, "alan@example.com", first_name="Alan", last_name="Turing")
    grace = await add_user(session, "grace@example.com", first_name="Grace", last_name="Hopper")
    linus = await add_user(session, "linus@example.com", first_name="Linus")
    await add_application(session, ada, status="PENDING", created_at=at(10))
    await add_application(session, alan, status="PENDING", created_at=at(20))
    await add_application(session, grace, status="PENDING", created_at=at(30))
    await add_application(session, linus, status="APPROVED", created_at=at(40))
    await persist(session)


def list_applications(run_db, **params):
    async def scenario(session):
        await seed_applications(session)
        use_case = ListFreelancerApplicationsUseCase(SQLAlchemyApplicationRepository(session))
        return await use_case.execute(build_application_query(**params))

    return run_db(scenario)


class TestListFreelancerApplications:
    """Test ListFreelancerApplicationsUseCase against SQLite."""

    def test_pending_second_page_of_one(self, run_db):
        page = list_applications(run_db, status="PENDING", page="2", page_size="1")

        assert page.total == 3
        assert page.pagination.total_pages == 3
        assert len(page.items) == 1
        assert page.items[0].applicant.email == "alan@example.com"

    def test_default_order_is_newest_first_with_applicant(self, run_db):
        page = list_applications(run_db)

        assert [a.applicant.first_name for a in page.items] == ["Linus", "Grace", "Alan", "Ada"]
        assert page.items[0].applicant.username == "linus"

    def test_ascending_created_at(self, run_db):
        page = list_applications(run_db, sort_by="createdAt", sort_dir="asc")

        assert page.items[0].applicant.first_name == "Ada"

    def test_search_matches_applicant_names(self, run_db):
        page = list_applications(run_db, q="HOPPER")

        assert [a.applicant.email for a in page.items] == ["grace@example.com"]

    def test_status_sort_follows_lifecycle(self, run_db):
        page = list_applications(run_db, sort_by="status", sort_dir="desc")

        assert page.items[0].status == ApplicationStatus.APPROVED
        assert [a.applicant.first_name for a in page.items[1:]] == ["Grace", "Alan", "Ada"]

    def test_inclusive_date_range(self, run_db):
        page = list_applications(
            run_db,
            date_from=at(20).isoformat(),
            date_to=at(30).isoformat(),
        )

        assert [a.applicant.first_name for a in page.items] == ["Grace", "Alan"]

    def test_date_only_upper_bound_is_midnight(self, run_db):
        page = list_applications(run_db, date_to="2024-05-01")

        # Every seeded row is after midnight.
        assert page.total == 0
        assert page.items == []

    def test_storage_failure_returns_empty_page(self, run_db):
        async def scenario(session):
            use_case = ListFreelancerApplicationsUseCase(SQLAlchemyApplicationRepository(session))
            return await use_case.execute(build_application_query(page="4"))

        page = run_db(scenario, create_schema=False)

        assert page.items == []
        assert page.total == 0
        assert page.page == 1
        assert page.page_size == 10


def test_date_parsing_matches_stored_precision():
    assert build_application_query(date_from=at(20).isoformat()).created_from == datetime(2024, 5, 1, 12, 20)
