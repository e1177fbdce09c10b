"""
Pydantic schemas for data access input and output records.
"""

# User schemas
from .user import (
    UserCreate,
    UserRecord
)

# Reservation schemas
from .reservation import (
    ReservationBase,
    ReservationCreate,
    ReservationRecord
)

# Property schemas
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyRecord,
    PropertySearchOptions
)

from .review import PropertyReviewCreate

__all__ = [
    # User
    "UserCreate",
    "UserRecord",

    # Reservation
    "ReservationBase",
    "ReservationCreate",
    "ReservationRecord",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyRecord",
    "PropertySearchOptions",

    # Review
    "PropertyReviewCreate"
]
