"""
Custom exceptions and error handling for NomadSuite travel compliance.

Defines application-specific exceptions with error codes for consistent
error handling between the calculation core and the HTTP handlers.

Usage:
    from core.errors import InvalidIntervalError, ErrorCode

    raise InvalidIntervalError("exit 2024-03-01 before entry 2024-03-05")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Trip errors
    INVALID_INTERVAL = "INVALID_INTERVAL"
    TRIP_OVERLAP = "TRIP_OVERLAP"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_INTERVAL: "A trip's exit date cannot be before its entry date.",
    ErrorCode.TRIP_OVERLAP: "This trip overlaps with a trip you have already recorded.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class NomadSuiteError(Exception):
    """Base exception for all NomadSuite errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class InvalidIntervalError(NomadSuiteError):
    """A date range ends before it starts."""

    default_code = ErrorCode.INVALID_INTERVAL


class TripOverlapError(NomadSuiteError):
    """A candidate trip conflicts with an existing trip."""

    default_code = ErrorCode.TRIP_OVERLAP

