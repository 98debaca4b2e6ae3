"""
Help requests module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import HelpRequest, CreateHelpRequestRequest


@runtime_checkable
class IHelpRequestService(Protocol):
    """Interface for help request operations."""

    def create_help_request(
        self,
        request: CreateHelpRequestRequest,
        owner_id: int,
    ) -> HelpRequest:
        """
        Post a new help request with no helpers.

        Raises:
            OwnerNotFoundError: If owner_id does not resolve to a user
        """
        ...

    def get_help_request(self, request_id: int) -> Optional[HelpRequest]:
        """
        Get a help request by ID.

        Returns:
            HelpRequest if found, None otherwise
        """
        ...

    def list_help_requests(self) -> list[HelpRequest]:
        """
        List unresolved help requests.

        Most urgent first; within the same urgency, most recent first.
        """
        ...

    def offer_help(self, request_id: int) -> HelpRequest:
        """
        Record one more helper on a request.

        Repeat offers are all counted.

        Raises:
            HelpRequestNotFoundError: If the request doesn't exist
        """
        ...
