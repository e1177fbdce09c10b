"""
Utility modules for LightBnB data access.
"""

from .auth import (
    hash_password,
    verify_password
)

from .exceptions import (
    APIException,
    UnauthorizedError,
    ConflictError,
    BadRequestError,
    ServiceUnavailableError,
    InvalidCredentialsError,
    StoreError,
    StoreUnavailableError,
    DuplicateResourceError
)

__all__ = [
    # Auth utilities
    "hash_password",
    "verify_password",

    # Exceptions
    "APIException",
    "UnauthorizedError",
    "ConflictError",
    "BadRequestError",
    "ServiceUnavailableError",
    "InvalidCredentialsError",
    "StoreError",
    "StoreUnavailableError",
    "DuplicateResourceError",
]
