"""
Base exception classes for the Campus Aid backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status, so a module only has to
pick the right parent.
"""

from typing import Optional, Any


class CampusAidError(Exception):
    """
    Base exception for all Campus Aid errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CampusAidError):
    """Resource not found."""

    status_code = 404


class RuleViolationError(CampusAidError):
    """The requested state transition is not permitted for the resource."""

    status_code = 400


class ConflictError(CampusAidError):
    """The resource would collide with an existing one."""

    status_code = 409


class ConsistencyError(CampusAidError):
    """
    Internal wiring fault.

    Raised when the store references something that should always exist.
    Never caused by client input, so it surfaces as a 500.
    """

    status_code = 500
