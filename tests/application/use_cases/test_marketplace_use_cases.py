"""Tests for the design catalog and favorite toggle use cases."""

from uuid import uuid4

import pytest
from application.queries import build_marketplace_query
from application.use_cases import ListMarketplaceDesignsUseCase, ToggleDesignFavoriteUseCase
from domain.exceptions import DependencyFailureError, NotFoundError
from domain.repositories import IDesignRepository
from infrastructure.database import SQLAlchemyUnitOfWork
from infrastructure.database.repositories import (
    SQLAlchemyDesignRepository,
    SQLAlchemyFavoriteRepository,
)
from support import add_category, add_design, add_favorite, add_user, at, persist


def list_use_case(session) -> ListMarketplaceDesignsUseCase:
    return ListMarketplaceDesignsUseCase(
        SQLAlchemyDesignRepository(session),
        SQLAlchemyFavoriteRepository(session),
    )


def toggle_use_case(session) -> ToggleDesignFavoriteUseCase:
    return ToggleDesignFavoriteUseCase(
        SQLAlchemyDesignRepository(session),
        SQLAlchemyFavoriteRepository(session),
        SQLAlchemyUnitOfWork(session),
    )


async def seed_catalog(session):
    nature = await add_category(session, "Nature", "nature")
    abstract = await add_category(session, "Abstract", "abstract")
    buyer = await add_user(session, "buyer@example.com", first_name="Bea")
    other = await add_user(session, "other@example.com")
    sunset = await add_design(
        session,
        "Sunset Horizon",
        description="A vibrant gradient design inspired by beach sunsets.",
        price="29.99",
        categories=[nature],
        average_rating=4.8,
        review_count=142,
        created_at=at(1),
    )
    waves = await add_design(
        session,
        "Ocean Waves",
        description="Calm blue waves, perfect for summer.",
        price="24.99",
        categories=[nature, abstract],
        average_rating=4.8,
        review_count=89,
        created_at=at(2),
    )
    geometry = await add_design(
        session,
        "Neon Geometry",
        description="Sharp lines under a SUNSET sky.",
        price="34.99",
        categories=[abstract],
        average_rating=4.9,
        review_count=12,
        created_at=at(3),
    )
    await add_design(session, "Draft Idea", description="sunset draft", is_published=False, created_at=at(4))
    await add_favorite(session, sunset, buyer)
    await add_favorite(session, sunset, other)
    await add_favorite(session, geometry, other)
    await persist(session)
    return {"buyer": buyer, "other": other, "sunset": sunset, "waves": waves, "geometry": geometry}


class TestListMarketplaceDesigns:
    """Test ListMarketplaceDesignsUseCase against SQLite."""

    def test_only_published_designs_newest_first(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            page = await list_use_case(session).execute(rows["buyer"].id, build_marketplace_query())
            return rows, page

        rows, page = run_db(scenario)

        assert [entry.design.title for entry in page.designs] == [
            "Neon Geometry",
            "Ocean Waves",
            "Sunset Horizon",
        ]
        assert page.pagination.total == 3
        assert page.pagination.total_pages == 1
        assert page.pagination.page_size == 12

    def test_favorite_state_is_per_user(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            page = await list_use_case(session).execute(rows["buyer"].id, build_marketplace_query())
            return {entry.design.title: entry for entry in page.designs}

        entries = run_db(scenario)

        assert entries["Sunset Horizon"].is_favorite is True
        assert entries["Sunset Horizon"].favorites_count == 2
        assert entries["Neon Geometry"].is_favorite is False
        assert entries["Neon Geometry"].favorites_count == 1
        assert entries["Ocean Waves"].is_favorite is False
        assert entries["Ocean Waves"].favorites_count == 0

    @pytest.mark.parametrize("term", ["sunset", "SUNSET", "  Sunset "])
    def test_search_is_case_insensitive_over_title_and_description(self, run_db, term):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(q=term)
            return await list_use_case(session).execute(rows["buyer"].id, query)

        page = run_db(scenario)

        assert sorted(entry.design.title for entry in page.designs) == ["Neon Geometry", "Sunset Horizon"]

    def test_search_treats_wildcards_literally(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(q="%")
            return await list_use_case(session).execute(rows["buyer"].id, query)

        assert run_db(scenario).designs == []

    def test_category_all_equals_no_category(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            use_case = list_use_case(session)
            everything = await use_case.execute(rows["buyer"].id, build_marketplace_query(category="all"))
            unfiltered = await use_case.execute(rows["buyer"].id, build_marketplace_query())
            return everything, unfiltered

        everything, unfiltered = run_db(scenario)

        assert [e.design.id for e in everything.designs] == [e.design.id for e in unfiltered.designs]

    def test_category_filter(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(category="abstract", sort="priceAsc")
            return await list_use_case(session).execute(rows["buyer"].id, query)

        page = run_db(scenario)

        assert [entry.design.title for entry in page.designs] == ["Ocean Waves", "Neon Geometry"]
        assert [c.slug for c in page.designs[0].design.categories] == ["abstract", "nature"]

    def test_available_categories_ordered_by_name(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            return await list_use_case(session).execute(rows["buyer"].id, build_marketplace_query())

        page = run_db(scenario)

        assert [c.name for c in page.available_categories] == ["Abstract", "Nature"]

    def test_rating_sort_breaks_ties_by_review_count(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(sort="rating")
            return await list_use_case(session).execute(rows["buyer"].id, query)

        page = run_db(scenario)

        assert [entry.design.title for entry in page.designs] == [
            "Neon Geometry",
            "Sunset Horizon",
            "Ocean Waves",
        ]

    def test_price_desc(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(sort="priceDesc")
            return await list_use_case(session).execute(rows["buyer"].id, query)

        page = run_db(scenario)

        assert [str(entry.design.price) for entry in page.designs] == ["34.99", "29.99", "24.99"]

    def test_pagination_window(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(page="2", page_size="2")
            return await list_use_case(session).execute(rows["buyer"].id, query)

        page = run_db(scenario)

        assert [entry.design.title for entry in page.designs] == ["Sunset Horizon"]
        assert page.pagination.page == 2
        assert page.pagination.total == 3
        assert page.pagination.total_pages == 2

    def test_no_matches_still_has_one_page(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            query = build_marketplace_query(q="unicorn")
            return await list_use_case(session).execute(rows["buyer"].id, query)

        page = run_db(scenario)

        assert page.designs == []
        assert page.pagination.total == 0
        assert page.pagination.total_pages == 1

    def test_storage_failure_returns_empty_payload(self, run_db):
        async def scenario(session):
            # No tables: every query fails at the driver.
            return await list_use_case(session).execute(uuid4(), build_marketplace_query(page="3"))

        page = run_db(scenario, create_schema=False)

        assert page.designs == []
        assert page.available_categories == []
        assert page.pagination.page == 1
        assert page.pagination.page_size == 12
        assert page.pagination.total_pages == 1


class FailingCategoriesRepository(IDesignRepository):
    """Design repository whose category lookup is down."""

    def __init__(self, inner: IDesignRepository):
        self.inner = inner

    async def get_published(self, design_id):
        return await self.inner.get_published(design_id)

    async def search_published(self, query):
        return await self.inner.search_published(query)

    async def list_categories(self):
        raise DependencyFailureError("categories unavailable")

    async def count_published(self):
        return await self.inner.count_published()


def test_partial_failure_degrades_whole_payload(run_db):
    async def scenario(session):
        rows = await seed_catalog(session)
        use_case = ListMarketplaceDesignsUseCase(
            FailingCategoriesRepository(SQLAlchemyDesignRepository(session)),
            SQLAlchemyFavoriteRepository(session),
        )
        return await use_case.execute(rows["buyer"].id, build_marketplace_query())

    page = run_db(scenario)

    assert page.designs == []
    assert page.pagination.total == 0


class TestToggleDesignFavorite:
    """Test ToggleDesignFavoriteUseCase against SQLite."""

    def test_toggle_adds_then_removes(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            use_case = toggle_use_case(session)
            first = await use_case.execute(rows["buyer"].id, rows["waves"].id)
            second = await use_case.execute(rows["buyer"].id, rows["waves"].id)
            return first, second

        first, second = run_db(scenario)

        assert first.is_favorite is True
        assert first.favorites_count == 1
        assert first.message == "Added to favorites."
        assert second.is_favorite is False
        assert second.favorites_count == 0
        assert second.message == "Removed from favorites."

    def test_toggle_twice_restores_listing_state(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            listing = list_use_case(session)
            before = await listing.execute(rows["buyer"].id, build_marketplace_query())
            toggle = toggle_use_case(session)
            await toggle.execute(rows["buyer"].id, rows["sunset"].id)
            await toggle.execute(rows["buyer"].id, rows["sunset"].id)
            after = await listing.execute(rows["buyer"].id, build_marketplace_query())
            return before, after

        before, after = run_db(scenario)

        def state(page):
            return [(e.design.id, e.is_favorite, e.favorites_count) for e in page.designs]

        assert state(before) == state(after)

    def test_removing_counts_other_users(self, run_db):
        async def scenario(session):
            rows = await seed_catalog(session)
            return await toggle_use_case(session).execute(rows["buyer"].id, rows["sunset"].id)

        result = run_db(scenario)

        assert result.is_favorite is False
        assert result.favorites_count == 1

    def test_unpublished_design_is_not_found(self, run_db):
        async def scenario(session):
            buyer = await add_user(session, "buyer@example.com")
            draft = await add_design(session, "Draft", is_published=False)
            await persist(session)
            await toggle_use_case(session).execute(buyer.id, draft.id)

        with pytest.raises(NotFoundError) as exc_info:
            run_db(scenario)
        assert exc_info.value.entity == "Design"

    def test_failed_recount_saves_nothing(self, run_db):
        class BrokenCountRepository(SQLAlchemyFavoriteRepository):
            async def count_for_design(self, design_id):
                raise DependencyFailureError("favorites count unavailable")

        async def scenario(session):
            rows = await seed_catalog(session)
            use_case = ToggleDesignFavoriteUseCase(
                SQLAlchemyDesignRepository(session),
                BrokenCountRepository(session),
                SQLAlchemyUnitOfWork(session),
            )
            with pytest.raises(DependencyFailureError):
                await use_case.execute(rows["buyer"].id, rows["waves"].id)
            session.expunge_all()
            return await SQLAlchemyFavoriteRepository(session).count_for_design(rows["waves"].id)

        assert run_db(scenario) == 0

    def test_unknown_design_is_not_found(self, run_db):
        async def scenario(session):
            await toggle_use_case(session).execute(uuid4(), uuid4())

        with pytest.raises(NotFoundError):
            run_db(scenario)
