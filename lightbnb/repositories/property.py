"""
Property repository for listing creation and rating-aware search.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.query_builder import PropertyQueryBuilder
from lightbnb.models.property import Property
from lightbnb.schemas.property import PropertySearchOptions
from typing import Optional, List, Dict, Any, Tuple
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property rows.
    Writes and searches go through the same store.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Insert a property. The store assigns the id.

        Args:
            property_data: Dictionary containing property information

        Returns:
            Created property instance
        """
        try:
            created_property = await self.create(property_data)
            logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
            return created_property
        except Exception as e:
            logger.error(f"Failed to create property: {e}")
            raise

    async def search_properties(
        self,
        options: Optional[PropertySearchOptions] = None,
        limit: int = 10
    ) -> List[Tuple[Property, Optional[float]]]:
        """
        Search reviewed properties, cheapest first.

        Args:
            options: Optional filter criteria
            limit: Maximum number of properties to return

        Returns:
            List of (property, average rating) pairs
        """
        try:
            builder = PropertyQueryBuilder(options, limit)
            query = builder.build()

            result = await self.db.execute(query)
            rows = result.all()

            properties = [
                (row[0], float(row[1]) if row[1] is not None else None)
                for row in rows
            ]

            logger.debug(f"Property search returned {len(properties)} results (limit {limit})")
            return properties
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise
