"""
Tests for repository classes.
Tests inserts, lookups, ordering and rating-aware search against SQLite.
"""

import pytest
from datetime import date
from sqlalchemy.exc import IntegrityError

from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.review import PropertyReviewRepository
from lightbnb.schemas.property import PropertySearchOptions
from tests.conftest import UserFactory, PropertyFactory


class TestBaseRepository:
    """Test base repository functionality through UserRepository."""

    @pytest.mark.asyncio
    async def test_create(self, user_repository: UserRepository):
        """Test creating a record."""
        user = await user_repository.create_user(UserFactory.create_user_data(email="test@example.com"))

        assert user.id is not None
        assert user.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_get_by_id(self, user_repository: UserRepository):
        """Test getting a record by ID."""
        created_user = await user_repository.create_user(UserFactory.create_user_data())

        retrieved_user = await user_repository.get_by_id(created_user.id)

        assert retrieved_user is not None
        assert retrieved_user.id == created_user.id
        assert retrieved_user.email == created_user.email

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, user_repository: UserRepository):
        """Test getting a non-existent record."""
        assert await user_repository.get_by_id(12345) is None

    @pytest.mark.asyncio
    async def test_bulk_create(self, user_repository: UserRepository):
        """Test bulk creating records keeps input order."""
        rows = [UserFactory.create_user_data(name=f"User {i}") for i in range(3)]

        users = await user_repository.bulk_create(rows)

        assert [u.name for u in users] == ["User 0", "User 1", "User 2"]
        assert len({u.id for u in users}) == 3
        assert (await user_repository.get_by_id(users[2].id)).name == "User 2"

    @pytest.mark.asyncio
    async def test_create_rolls_back_on_failure(self, user_repository: UserRepository):
        """Test that a failed insert leaves the session usable."""
        await user_repository.create_user(UserFactory.create_user_data(email="taken@example.com"))

        with pytest.raises(IntegrityError):
            await user_repository.create_user(UserFactory.create_user_data(email="taken@example.com"))

        user = await user_repository.get_by_email("taken@example.com")
        assert user is not None
        assert user.id is not None


class TestUserRepository:
    """Test user repository specific functionality."""

    @pytest.mark.asyncio
    async def test_get_by_email(self, user_repository: UserRepository):
        """Test getting user by email."""
        await user_repository.create_user(UserFactory.create_user_data(email="test@example.com"))

        user = await user_repository.get_by_email("test@example.com")

        assert user is not None
        assert user.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_get_by_email_is_exact(self, user_repository: UserRepository):
        """Test that mixed-case emails are matched exactly as stored."""
        await user_repository.create_user(UserFactory.create_user_data(email="Legacy.User@Example.com"))

        user = await user_repository.get_by_email("Legacy.User@Example.com")

        assert user is not None
        assert user.email == "Legacy.User@Example.com"
        assert await user_repository.get_by_email("legacy.user@example.com") is None

    @pytest.mark.asyncio
    async def test_get_by_email_not_found(self, user_repository: UserRepository):
        """Test getting non-existent user by email."""
        assert await user_repository.get_by_email("nonexistent@example.com") is None


class TestReservationRepository:
    """Test reservation repository functionality."""

    @pytest.mark.asyncio
    async def test_reservations_for_guest_are_ordered(
        self,
        user_repository: UserRepository,
        property_repository: PropertyRepository,
        reservation_repository: ReservationRepository
    ):
        """Test that reservations come back by start date, then id."""
        guest = await user_repository.create_user(UserFactory.create_user_data())
        owner = await user_repository.create_user(UserFactory.create_user_data())
        listing = await property_repository.create_property(PropertyFactory.create_property_data(owner.id))

        for start in (date(2022, 5, 1), date(2021, 3, 1), date(2022, 5, 1)):
            await reservation_repository.create_reservation({
                "guest_id": guest.id,
                "property_id": listing.id,
                "start_date": start,
                "end_date": start
            })

        reservations = await reservation_repository.get_reservations_for_guest(guest.id)

        assert [r.start_date for r in reservations] == [date(2021, 3, 1), date(2022, 5, 1), date(2022, 5, 1)]
        assert reservations[1].id < reservations[2].id

    @pytest.mark.asyncio
    async def test_reservations_exclude_other_guests(
        self,
        user_repository: UserRepository,
        property_repository: PropertyRepository,
        reservation_repository: ReservationRepository
    ):
        """Test that only the requested guest's reservations are returned."""
        guest = await user_repository.create_user(UserFactory.create_user_data())
        other = await user_repository.create_user(UserFactory.create_user_data())
        listing = await property_repository.create_property(PropertyFactory.create_property_data(guest.id))

        for guest_id in (guest.id, other.id, other.id):
            await reservation_repository.create_reservation({
                "guest_id": guest_id,
                "property_id": listing.id,
                "start_date": date(2023, 1, 1),
                "end_date": date(2023, 1, 3)
            })

        reservations = await reservation_repository.get_reservations_for_guest(guest.id)

        assert len(reservations) == 1
        assert reservations[0].guest_id == guest.id


class TestPropertyRepository:
    """Test property repository functionality."""

    @pytest.mark.asyncio
    async def test_create_property(self, user_repository: UserRepository, property_repository: PropertyRepository):
        """Test creating a property."""
        owner = await user_repository.create_user(UserFactory.create_user_data())

        listing = await property_repository.create_property(
            PropertyFactory.create_property_data(owner.id, title="Harbour loft", cost_per_night=15050)
        )

        assert listing.id is not None
        assert listing.title == "Harbour loft"
        assert listing.cost_per_night == 15050

    @pytest.mark.asyncio
    async def test_search_pairs_properties_with_ratings(
        self,
        user_repository: UserRepository,
        property_repository: PropertyRepository,
        review_repository: PropertyReviewRepository
    ):
        """Test that search returns (property, average rating) pairs."""
        owner = await user_repository.create_user(UserFactory.create_user_data())
        listing = await property_repository.create_property(PropertyFactory.create_property_data(owner.id))

        for rating in (3, 4):
            await review_repository.create_review({
                "guest_id": owner.id,
                "property_id": listing.id,
                "rating": rating,
                "message": "messages"
            })

        results = await property_repository.search_properties()

        assert len(results) == 1
        found, average = results[0]
        assert found.id == listing.id
        assert average == pytest.approx(3.5)

    @pytest.mark.asyncio
    async def test_search_orders_by_cost_and_limits(
        self,
        user_repository: UserRepository,
        property_repository: PropertyRepository,
        review_repository: PropertyReviewRepository
    ):
        """Test that search is cheapest first and honours the limit."""
        owner = await user_repository.create_user(UserFactory.create_user_data())

        for cost in (30000, 10000, 20000):
            listing = await property_repository.create_property(
                PropertyFactory.create_property_data(owner.id, cost_per_night=cost)
            )
            await review_repository.create_review({
                "guest_id": owner.id,
                "property_id": listing.id,
                "rating": 4
            })

        results = await property_repository.search_properties(PropertySearchOptions(), limit=2)

        assert [p.cost_per_night for p, _ in results] == [10000, 20000]

    @pytest.mark.asyncio
    async def test_search_excludes_unreviewed(
        self,
        user_repository: UserRepository,
        property_repository: PropertyRepository
    ):
        """Test that properties without reviews never match."""
        owner = await user_repository.create_user(UserFactory.create_user_data())
        await property_repository.create_property(PropertyFactory.create_property_data(owner.id))

        assert await property_repository.search_properties() == []
