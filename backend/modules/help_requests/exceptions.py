"""
Help requests module exceptions.
"""

from shared.exceptions import NotFoundError


class HelpRequestNotFoundError(NotFoundError):
    """Raised when a help request is not found."""

    def __init__(self, request_id: int):
        super().__init__(
            f"Help request not found: {request_id}",
            code="HELP_REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )
