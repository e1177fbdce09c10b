"""
Service layer: the data access entry points plus account and seeding flows.
"""

from lightbnb.services.data_access import (
    get_user_with_email,
    get_user_with_id,
    add_user,
    get_all_reservations,
    get_all_properties,
    get_property_with_id,
    add_property
)
from lightbnb.services.accounts import register_user, login
from lightbnb.services.error_handler import ErrorHandlerService
from lightbnb.services.seed import seed_store, load_dataset

__all__ = [
    "get_user_with_email",
    "get_user_with_id",
    "add_user",
    "get_all_reservations",
    "get_all_properties",
    "get_property_with_id",
    "add_property",
    "register_user",
    "login",
    "ErrorHandlerService",
    "seed_store",
    "load_dataset"
]
