"""
Custom exceptions and error handling for Trip Insights.

Defines application-specific exceptions with error codes so the handler layer
can tell expected outcomes (missing entities, bad arguments) apart from
infrastructure failures.

Usage:
    from tripinsights.errors import TripNotFoundError

    raise TripNotFoundError(trip_id)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"

    # Request errors
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    UNSUPPORTED_RESOURCE = "UNSUPPORTED_RESOURCE"

    # System errors
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.ENTITY_NOT_FOUND: "The requested record was not found.",
    ErrorCode.TRIP_NOT_FOUND: "The requested trip was not found.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please check the arguments and try again.",
    ErrorCode.UNKNOWN_TOOL: "The requested tool is not available.",
    ErrorCode.UNSUPPORTED_RESOURCE: "The requested resource is not supported.",
    ErrorCode.STORAGE_UNAVAILABLE: "Trip data is temporarily unavailable. Please try again later.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripInsightsError(Exception):
    """Base exception for all Trip Insights errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class EntityNotFoundError(TripInsightsError):
    """A report's primary entity does not exist in the store."""

    def __init__(self, collection: str, entity_id: str, code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"{collection}/{entity_id} not found", code=code)


class TripNotFoundError(EntityNotFoundError):
    """The trip a report was requested for does not exist."""

    def __init__(self, trip_id: str):
        super().__init__("viagens", trip_id, code=ErrorCode.TRIP_NOT_FOUND)


class InvalidRequestError(TripInsightsError):
    """Handler arguments are missing or malformed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_REQUEST):
        super().__init__(message, code=code)
