"""
Custom exception classes for LightBnB data access.
Provides typed failures with HTTP status codes that route handlers can surface directly.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class UnauthorizedError(APIException):
    """Authentication required exception."""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED"
        )


class ConflictError(APIException):
    """Resource conflict exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code="CONFLICT"
        )


class BadRequestError(APIException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="BAD_REQUEST"
        )


class ServiceUnavailableError(APIException):
    """Service unavailable exception."""

    def __init__(self, detail: str = "Service temporarily unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code="SERVICE_UNAVAILABLE"
        )


# Authentication specific exceptions
class InvalidCredentialsError(UnauthorizedError):
    """Invalid login credentials exception."""

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail)


# Store specific exceptions
class StoreError(APIException):
    """A statement reached the store and failed there."""

    def __init__(self, operation: str, detail: Optional[str] = None):
        message = f"Store operation failed: {operation}"
        if detail:
            message += f" - {detail}"
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            error_code="STORE_ERROR"
        )
        self.operation = operation


class StoreUnavailableError(ServiceUnavailableError):
    """The store could not be reached."""

    def __init__(self, operation: str):
        super().__init__(f"Store unavailable during {operation}")
        self.operation = operation


class DuplicateResourceError(ConflictError):
    """Duplicate resource exception."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")
        self.resource = resource
        self.identifier = identifier
