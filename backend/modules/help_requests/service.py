"""
Help requests service implementation backed by the in-memory entity store.
"""

import logging
from typing import Optional

from shared.models import Clock, utc_now
from shared.repository import EntityStore
from modules.users.interfaces import IUserService

from .interfaces import IHelpRequestService
from .models import HelpRequest, CreateHelpRequestRequest
from .exceptions import HelpRequestNotFoundError

logger = logging.getLogger(__name__)


class HelpRequestService(IHelpRequestService):
    """Help request service over an EntityStore[HelpRequest]."""

    def __init__(
        self,
        store: EntityStore[HelpRequest],
        users: IUserService,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._users = users
        self._clock = clock

    def create_help_request(
        self,
        request: CreateHelpRequestRequest,
        owner_id: int,
    ) -> HelpRequest:
        requester = self._users.require_owner(owner_id)

        with self._store.locked():
            help_request = HelpRequest(
                id=self._store.allocate_id(),
                created_at=self._clock(),
                requester_id=requester.id,
                title=request.title,
                category=request.category,
                description=request.description,
                location=request.location,
                urgency=request.urgency,
                requester_name=requester.full_name,
                requester_image=requester.profile_image or "",
                helpers_count=0,
                resolved=False,
            )
            self._store.put(help_request)

        logger.info(
            f"Created help request {help_request.id}: "
            f"{help_request.title} ({help_request.urgency})"
        )
        return help_request

    def get_help_request(self, request_id: int) -> Optional[HelpRequest]:
        return self._store.get(request_id)

    def list_help_requests(self) -> list[HelpRequest]:
        open_requests = [r for r in self._store.list() if not r.resolved]

        # Two stable passes: newest first, then by urgency rank
        open_requests.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        open_requests.sort(key=lambda r: r.urgency_rank)
        return open_requests

    def offer_help(self, request_id: int) -> HelpRequest:
        with self._store.locked():
            help_request = self._store.get(request_id)
            if help_request is None:
                raise HelpRequestNotFoundError(request_id)

            updated = help_request.model_copy(
                update={"helpers_count": help_request.helpers_count + 1}
            )
            self._store.put(updated)

        logger.info(f"Help offered on request {request_id}: {updated.helpers_count} helpers")
        return updated
