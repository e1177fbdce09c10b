"""
Data access functions used by the LightBnB web application.

Every function takes the Store to run against as its first argument, opens a
session for the one statement it issues, and returns pydantic records.

Lookups return None when nothing matches. Store failures always raise a typed
exception (StoreError, StoreUnavailableError or DuplicateResourceError), so
callers can tell "not found" apart from "broken".
"""

from typing import Any, Dict, List, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from lightbnb.database import Store
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.schemas.reservation import ReservationRecord
from lightbnb.schemas.property import PropertyCreate, PropertyRecord, PropertySearchOptions
from lightbnb.services.error_handler import ErrorHandlerService
from lightbnb.utils.exceptions import BadRequestError
import logging

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

STORE_ERRORS = (SQLAlchemyError, OSError)


def _check_limit(store: Store, limit: int) -> int:
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
        raise BadRequestError(f"limit must be a positive integer, got {limit!r}")
    if limit > store.max_result_limit:
        raise BadRequestError(f"limit cannot exceed {store.max_result_limit}")
    return limit


# Users

async def get_user_with_email(store: Store, email: str) -> Optional[UserRecord]:
    """
    Get a single user given their email.

    Returns:
        The user, or None if no user has that email
    """
    try:
        async with store.session() as session:
            user = await UserRepository(session).get_by_email(email)
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(e, "get_user_with_email") from e

    return UserRecord.model_validate(user) if user else None


async def get_user_with_id(store: Store, user_id: int) -> Optional[UserRecord]:
    """
    Get a single user given their id.

    Returns:
        The user, or None if no user has that id
    """
    try:
        async with store.session() as session:
            user = await UserRepository(session).get_by_id(user_id)
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(e, "get_user_with_id") from e

    return UserRecord.model_validate(user) if user else None


async def add_user(store: Store, user: Union[UserCreate, Dict[str, Any]]) -> UserRecord:
    """
    Add a new user.

    Args:
        user: name, email and password. The password is stored as given.

    Returns:
        The user as stored, including its generated id

    Raises:
        DuplicateResourceError: If the email is already registered
    """
    user_in = user if isinstance(user, UserCreate) else UserCreate.model_validate(user)

    try:
        async with store.session() as session:
            created = await UserRepository(session).create_user(user_in.model_dump())
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(
            e, "add_user", resource="User", identifier=user_in.email
        ) from e

    return UserRecord.model_validate(created)


# Reservations

async def get_all_reservations(store: Store, guest_id: int, limit: int = DEFAULT_LIMIT) -> List[ReservationRecord]:
    """
    Get the reservations of a single guest.

    Args:
        guest_id: The id of the guest
        limit: Maximum number of reservations to return

    Returns:
        Up to `limit` reservations, earliest start date first
    """
    _check_limit(store, limit)

    try:
        async with store.session() as session:
            reservations = await ReservationRepository(session).get_reservations_for_guest(guest_id, limit)
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(e, "get_all_reservations") from e

    return [ReservationRecord.model_validate(r) for r in reservations]


# Properties

async def get_all_properties(
    store: Store,
    options: Union[PropertySearchOptions, Dict[str, Any], None] = None,
    limit: int = DEFAULT_LIMIT
) -> List[PropertyRecord]:
    """
    Search reviewed properties.

    Args:
        options: Optional city pattern, owner, price range (dollars) and minimum rating
        limit: Maximum number of properties to return

    Returns:
        Properties ordered by nightly cost, each carrying its average_rating
    """
    _check_limit(store, limit)

    if options is None:
        search_options = PropertySearchOptions()
    elif isinstance(options, PropertySearchOptions):
        search_options = options
    else:
        search_options = PropertySearchOptions.model_validate(options)

    try:
        async with store.session() as session:
            rows = await PropertyRepository(session).search_properties(search_options, limit)
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(e, "get_all_properties") from e

    records = []
    for property_obj, rating in rows:
        record = PropertyRecord.model_validate(property_obj)
        record.average_rating = rating
        records.append(record)
    return records


async def get_property_with_id(store: Store, property_id: int) -> Optional[PropertyRecord]:
    """
    Get a single property given its id, reviewed or not.
    average_rating is left unset.
    """
    try:
        async with store.session() as session:
            property_obj = await PropertyRepository(session).get_by_id(property_id)
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(e, "get_property_with_id") from e

    return PropertyRecord.model_validate(property_obj) if property_obj else None


async def add_property(store: Store, property: Union[PropertyCreate, Dict[str, Any]]) -> PropertyRecord:
    """
    Add a property to the store that get_all_properties reads from.

    The store assigns the id. A property only shows up in searches once it has
    at least one review.

    Returns:
        The property as stored
    """
    property_in = property if isinstance(property, PropertyCreate) else PropertyCreate.model_validate(property)

    try:
        async with store.session() as session:
            created = await PropertyRepository(session).create_property(property_in.model_dump())
    except STORE_ERRORS as e:
        raise ErrorHandlerService.translate_store_error(e, "add_property") from e

    return PropertyRecord.model_validate(created)
