"""
User repository for account lookups and creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Insert a user.

        There is no pre-check for an existing email; the unique constraint
        on users.email decides and its IntegrityError propagates.

        Args:
            user_data: Dictionary with name, email and password

        Returns:
            Created user instance with its generated id
        """
        try:
            created_user = await self.create(
                {
                    "name": user_data["name"],
                    "email": user_data["email"],
                    "password": user_data["password"],
                }
            )
            logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
            return created_user
        except Exception as e:
            logger.error(f"Failed to create user: {e}")
            raise

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address, matched exactly as stored.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise
        """
        try:
            query = select(User).where(User.email == email)
            result = await self.db.execute(query)
            user = result.scalars().first()

            if user:
                logger.debug(f"Retrieved user by email: {email}")
            else:
                logger.debug(f"User with email {email} not found")

            return user
        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {e}")
            raise
