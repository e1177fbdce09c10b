"""
Tests for database models.
Tests model construction, table mapping and relationship loading.
"""

import pytest
from datetime import date
from sqlalchemy import inspect
from sqlalchemy.exc import InvalidRequestError

from lightbnb.database import Store
from lightbnb.models import User, Property, Reservation, PropertyReview
from lightbnb.repositories.reservation import ReservationRepository
from tests.conftest import ReservationFactory


class TestReservationModel:
    """Test Reservation mapping."""

    def test_reservation_creation(self):
        """Test building a reservation in memory."""
        reservation = Reservation(
            start_date=date(2023, 1, 1),
            end_date=date(2023, 1, 3),
            property_id=1,
            guest_id=2
        )

        assert reservation.start_date == date(2023, 1, 1)
        assert reservation.end_date == date(2023, 1, 3)
        assert "guest_id=2" in repr(reservation)

    def test_relationships_are_mapped(self):
        """Test that the property and guest relationships are real mappings."""
        relationships = inspect(Reservation).relationships

        assert relationships["property"].mapper.class_ is Property
        assert relationships["guest"].mapper.class_ is User

    def test_columns(self):
        """Test the reservations table layout."""
        columns = set(Reservation.__table__.columns.keys())
        assert columns == {"id", "start_date", "end_date", "property_id", "guest_id"}


class TestRelationshipLoading:
    """Test that relationships are never loaded implicitly."""

    def test_lazy_strategy(self):
        for model in (User, Property, Reservation, PropertyReview):
            for relationship in inspect(model).relationships:
                assert relationship.lazy == "raise", f"{model.__name__}.{relationship.key}"

    @pytest.mark.asyncio
    async def test_access_raises(self, store: Store, test_guest, test_property):
        created = await ReservationFactory.create_reservation(store, test_guest.id, test_property.id)

        async with store.session() as session:
            reservation = await ReservationRepository(session).get_by_id(created.id)

            assert reservation.property_id == test_property.id
            with pytest.raises(InvalidRequestError):
                reservation.property


class TestReviewModel:
    """Test PropertyReview mapping."""

    def test_rating_check_constraint(self):
        constraints = {c.name for c in PropertyReview.__table__.constraints}
        assert "ck_property_reviews_rating" in constraints
