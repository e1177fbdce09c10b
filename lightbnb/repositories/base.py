"""
Base repository class with common CRUD operations using async SQLAlchemy.
Provides generic database operations that can be extended by specific repositories.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from lightbnb.database import Base
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common CRUD operations.
    Uses async SQLAlchemy for all database operations; failures are logged and re-raised.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new record in the database.

        Args:
            obj_in: Dictionary of field values for the new record

        Returns:
            Created model instance, refreshed so generated columns are populated

        Raises:
            Exception: If database operation fails
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a record by its ID.

        Args:
            id: Primary key of the record to retrieve

        Returns:
            Model instance if found, None otherwise
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await self.db.execute(query)
            obj = result.scalar_one_or_none()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} with id: {id}")
            else:
                logger.debug(f"{self.model.__name__} with id {id} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by id {id}: {e}")
            raise

    async def bulk_create(self, objects_in: List[Dict[str, Any]]) -> List[ModelType]:
        """
        Create multiple records in a single transaction.

        Args:
            objects_in: List of dictionaries with field values

        Returns:
            List of created model instances

        Raises:
            Exception: If database operation fails
        """
        try:
            db_objects = [self.model(**obj_data) for obj_data in objects_in]
            self.db.add_all(db_objects)
            await self.db.commit()

            # Refresh all objects to get generated IDs
            for obj in db_objects:
                await self.db.refresh(obj)

            logger.debug(f"Bulk created {len(db_objects)} {self.model.__name__} records")
            return db_objects
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to bulk create {self.model.__name__} records: {e}")
            raise
