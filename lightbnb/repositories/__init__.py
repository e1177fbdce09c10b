"""
Repository layer for data access operations.
Each repository wraps one async session and logs and re-raises store failures.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.query_builder import PropertyQueryBuilder, FilterPredicate, FilterStage
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.review import PropertyReviewRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "PropertyQueryBuilder",
    "FilterPredicate",
    "FilterStage",
    "ReservationRepository",
    "PropertyReviewRepository",
    "UserRepository"
]
