"""
Test configuration and fixtures for LightBnB data access.
Provides store fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
from datetime import date
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from lightbnb.database import Store
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.review import PropertyReviewRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.user import UserRecord
from lightbnb.schemas.property import PropertyRecord
from lightbnb.services.data_access import add_user, add_property
from lightbnb.services.seed import seed_store


# In-memory SQLite shared through a single connection
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def store() -> AsyncGenerator[Store, None]:
    """Create a store with fresh tables for each test."""
    test_store = Store(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    await test_store.create_tables()
    yield test_store
    await test_store.drop_tables()
    await test_store.close()


@pytest.fixture
async def seeded_store(store: Store) -> Store:
    """Store loaded with the bundled dataset."""
    await seed_store(store)
    return store


@pytest.fixture
async def db_session(store: Store) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with store.session() as session:
        yield session


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


@pytest.fixture
def review_repository(db_session: AsyncSession) -> PropertyReviewRepository:
    """Create a review repository instance."""
    return PropertyReviewRepository(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: Optional[str] = None,
        password: str = "password"
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password
        }

    @staticmethod
    async def create_user(store: Store, **kwargs) -> UserRecord:
        """Create a test user in the store."""
        return await add_user(store, UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: int = 10000,
        city: str = "Vancouver",
        number_of_bedrooms: int = 2,
        active: bool = True
    ) -> dict:
        """Create property data dictionary."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": "A lovely test property",
            "thumbnail_photo_url": "https://example.com/thumb.jpg",
            "cover_photo_url": "https://example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": number_of_bedrooms,
            "country": "Canada",
            "street": "123 Test Street",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
            "active": active
        }

    @staticmethod
    async def create_property(store: Store, owner_id: int, **kwargs) -> PropertyRecord:
        """Create a test property in the store."""
        return await add_property(store, PropertyFactory.create_property_data(owner_id, **kwargs))


class ReservationFactory:
    """Factory for creating test reservations."""

    @staticmethod
    async def create_reservation(
        store: Store,
        guest_id: int,
        property_id: int,
        start_date: date = date(2023, 6, 1),
        end_date: date = date(2023, 6, 5)
    ) -> Reservation:
        """Create a test reservation in the store."""
        async with store.session() as session:
            return await ReservationRepository(session).create_reservation({
                "guest_id": guest_id,
                "property_id": property_id,
                "start_date": start_date,
                "end_date": end_date
            })


class ReviewFactory:
    """Factory for creating test reviews."""

    @staticmethod
    async def create_review(
        store: Store,
        guest_id: int,
        property_id: int,
        rating: int,
        reservation_id: Optional[int] = None
    ) -> PropertyReview:
        """Create a test review in the store."""
        async with store.session() as session:
            return await PropertyReviewRepository(session).create_review({
                "guest_id": guest_id,
                "property_id": property_id,
                "reservation_id": reservation_id,
                "rating": rating,
                "message": "messages"
            })


# Common test fixtures
@pytest.fixture
async def test_owner(store: Store) -> UserRecord:
    """Create a user who owns properties."""
    return await UserFactory.create_user(store, name="Test Owner", email="owner@test.com")


@pytest.fixture
async def test_guest(store: Store) -> UserRecord:
    """Create a user who books properties."""
    return await UserFactory.create_user(store, name="Test Guest", email="guest@test.com")


@pytest.fixture
async def test_property(store: Store, test_owner: UserRecord) -> PropertyRecord:
    """Create a test property."""
    return await PropertyFactory.create_property(store, test_owner.id, title="Test Property")


# Utility functions for tests
def assert_costs_ascending(properties):
    """Assert that properties are ordered cheapest first."""
    costs = [p.cost_per_night for p in properties]
    assert costs == sorted(costs)
