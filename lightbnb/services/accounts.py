"""
Account flows built on the user data access functions.
Handles password hashing on sign-up and credential checks on login.
"""

from typing import Any, Dict, Union
from lightbnb.database import Store
from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.services.data_access import add_user, get_user_with_email
from lightbnb.utils.auth import hash_password, verify_password
from lightbnb.utils.exceptions import InvalidCredentialsError
import logging

logger = logging.getLogger(__name__)


async def register_user(store: Store, user: Union[UserCreate, Dict[str, Any]]) -> UserRecord:
    """
    Create a user whose password is stored as a bcrypt hash.

    Raises:
        DuplicateResourceError: If the email is already registered
    """
    user_in = user if isinstance(user, UserCreate) else UserCreate.model_validate(user)
    hashed = user_in.model_copy(update={"password": hash_password(user_in.password)})

    created = await add_user(store, hashed)
    logger.info(f"Registered user: {created.email} (ID: {created.id})")
    return created


async def login(store: Store, email: str, password: str) -> UserRecord:
    """
    Check a user's credentials.

    Returns:
        The user whose email and password match

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong
    """
    user = await get_user_with_email(store, email)

    if not user:
        logger.warning(f"Failed login attempt for unknown email: {email}")
        raise InvalidCredentialsError()

    if not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for email: {email}")
        raise InvalidCredentialsError()

    logger.info(f"User logged in: {user.email}")
    return user
