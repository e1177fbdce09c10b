"""
Error handling service for consistent store error translation and formatting.
Maps SQLAlchemy and driver failures onto typed exceptions and builds the
error envelope that callers render.
"""

from typing import Dict, Any, Optional, List
from datetime import datetime, timezone
from sqlalchemy.exc import (
    SQLAlchemyError,
    IntegrityError,
    OperationalError,
    InterfaceError,
    DisconnectionError,
)
from lightbnb.utils.exceptions import (
    APIException,
    DuplicateResourceError,
    StoreError,
    StoreUnavailableError,
)
import logging
import uuid

logger = logging.getLogger(__name__)


class ErrorHandlerService:
    """
    Service for handling and formatting errors consistently across data access.
    Every store failure becomes an APIException subclass; not-found is never an error.
    """

    @staticmethod
    def format_error_response(
        error_code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Format error response in a consistent structure.

        Args:
            error_code: Error code identifier
            message: Human-readable error message
            details: Optional list of detailed error information
            request_id: Optional request identifier for tracking

        Returns:
            Formatted error response dictionary
        """
        response = {
            "error": {
                "code": error_code,
                "message": message,
                "timestamp": ErrorHandlerService._get_current_timestamp(),
            }
        }

        if details:
            response["error"]["details"] = details

        if request_id:
            response["error"]["request_id"] = request_id

        return response

    @staticmethod
    def handle_api_exception(exception: APIException, request_id: Optional[str] = None) -> Dict[str, Any]:
        """Format a typed data access failure for a caller to render."""
        return ErrorHandlerService.format_error_response(
            error_code=exception.error_code or "ERROR",
            message=exception.detail,
            request_id=request_id or ErrorHandlerService._generate_request_id()
        )

    @staticmethod
    def translate_store_error(
        exception: Exception,
        operation: str,
        resource: Optional[str] = None,
        identifier: Optional[str] = None
    ) -> Exception:
        """
        Translate a store failure into a typed exception.

        Args:
            exception: Error raised while talking to the store
            operation: Name of the data access operation that failed
            resource: Resource being written, for duplicate reporting
            identifier: Natural key of the resource being written

        Returns:
            The exception to raise. Errors that are not store failures are
            returned unchanged.
        """
        if isinstance(exception, APIException):
            return exception

        if isinstance(exception, IntegrityError):
            constraint_info = ErrorHandlerService._extract_constraint_info(exception)
            logger.error(f"Integrity error during {operation}: {exception}")
            if constraint_info == "Duplicate value for unique field" and resource:
                return DuplicateResourceError(resource, identifier or "")
            return StoreError(operation, constraint_info or "Data integrity constraint violation")

        if isinstance(exception, (OperationalError, InterfaceError, DisconnectionError, OSError)):
            logger.error(f"Store unavailable during {operation}: {exception}")
            return StoreUnavailableError(operation)

        if isinstance(exception, SQLAlchemyError):
            logger.error(f"Store error during {operation}: {exception}")
            return StoreError(operation)

        return exception

    @staticmethod
    def _generate_request_id() -> str:
        """Generate a unique request ID for error tracking."""
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_current_timestamp() -> str:
        """Get current timestamp in ISO format."""
        return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"

    @staticmethod
    def _extract_constraint_info(exception: IntegrityError) -> Optional[str]:
        """
        Extract constraint information from integrity error.

        Args:
            exception: SQLAlchemy integrity error

        Returns:
            Constraint information string or None
        """
        error_msg = str(exception.orig).lower()

        # Common constraint patterns (PostgreSQL and SQLite wording)
        if "unique constraint" in error_msg or "duplicate key" in error_msg:
            return "Duplicate value for unique field"
        elif "foreign key constraint" in error_msg:
            return "Referenced record does not exist"
        elif "not null constraint" in error_msg or "null value" in error_msg:
            return "Required field cannot be empty"
        elif "check constraint" in error_msg:
            return "Value does not meet validation requirements"

        return None
