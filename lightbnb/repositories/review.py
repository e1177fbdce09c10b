"""
Property review repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.review import PropertyReview
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)


class PropertyReviewRepository(BaseRepository[PropertyReview]):
    """Repository for property review rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(PropertyReview, db)

    async def create_review(self, review_data: Dict[str, Any]) -> PropertyReview:
        try:
            review = await self.create(review_data)
            logger.info(f"Created review {review.id} for property {review.property_id} (rating {review.rating})")
            return review
        except Exception as e:
            logger.error(f"Failed to create review: {e}")
            raise
