"""Tests for help requests service."""

import pytest

from modules.users.exceptions import OwnerNotFoundError
from modules.help_requests.exceptions import HelpRequestNotFoundError


class TestCreateHelpRequest:
    def test_create_help_request(self, help_request_service, owner, help_draft):
        """Should start with no helpers and unresolved."""
        help_request = help_request_service.create_help_request(help_draft(), owner.id)

        assert help_request.id == 1
        assert help_request.requester_id == owner.id
        assert help_request.title == "Need help moving a desk"
        assert help_request.urgency == "Soon (this week)"
        assert help_request.requester_name == "Maya Chen"
        assert help_request.requester_image == "https://example.com/maya.png"
        assert help_request.helpers_count == 0
        assert help_request.resolved is False

    def test_unknown_owner_persists_nothing(self, help_request_service, help_draft):
        with pytest.raises(OwnerNotFoundError):
            help_request_service.create_help_request(help_draft(), 50)
        assert help_request_service.list_help_requests() == []


class TestListHelpRequests:
    def test_urgency_order(self, help_request_service, owner, help_draft):
        """Most urgent first regardless of creation order."""
        for urgency in ["Not urgent", "Very Urgent (within 1 hour)", "Soon (this week)"]:
            help_request_service.create_help_request(help_draft(urgency=urgency), owner.id)

        urgencies = [r.urgency for r in help_request_service.list_help_requests()]
        assert urgencies == ["Very Urgent (within 1 hour)", "Soon (this week)", "Not urgent"]

    def test_newest_first_within_same_urgency(self, help_request_service, owner, help_draft):
        older = help_request_service.create_help_request(
            help_draft(title="older", urgency="Urgent (today)"), owner.id
        )
        newer = help_request_service.create_help_request(
            help_draft(title="newer", urgency="Urgent"), owner.id
        )
        help_request_service.create_help_request(
            help_draft(title="later but less urgent", urgency="Soon (this week)"), owner.id
        )

        ids = [r.id for r in help_request_service.list_help_requests()]
        assert ids[:2] == [newer.id, older.id]

    def test_unrecognized_urgency_last(self, help_request_service, owner, help_draft):
        odd = help_request_service.create_help_request(help_draft(urgency="Whenever"), owner.id)
        help_request_service.create_help_request(help_draft(urgency="Not urgent"), owner.id)

        assert help_request_service.list_help_requests()[-1].id == odd.id

    def test_resolved_excluded(self, help_request_service, owner, help_draft):
        """Resolved requests should not be listed but stay retrievable."""
        open_request = help_request_service.create_help_request(help_draft(), owner.id)
        closed = help_request_service.create_help_request(help_draft(), owner.id)

        store = help_request_service._store
        store.put(store.get(closed.id).model_copy(update={"resolved": True}))

        assert [r.id for r in help_request_service.list_help_requests()] == [open_request.id]
        assert help_request_service.get_help_request(closed.id).resolved is True


class TestOfferHelp:
    def test_offer_help_increments(self, help_request_service, owner, help_draft):
        help_request = help_request_service.create_help_request(help_draft(), owner.id)
        updated = help_request_service.offer_help(help_request.id)
        assert updated.helpers_count == 1
        assert help_request_service.get_help_request(help_request.id).helpers_count == 1

    def test_n_offers_counted_without_bound(self, help_request_service, owner, help_draft):
        """N offers should yield helpers_count == N."""
        help_request = help_request_service.create_help_request(help_draft(), owner.id)
        for _ in range(25):
            help_request_service.offer_help(help_request.id)
        assert help_request_service.get_help_request(help_request.id).helpers_count == 25

    def test_offer_does_not_resolve(self, help_request_service, owner, help_draft):
        help_request = help_request_service.create_help_request(help_draft(), owner.id)
        help_request_service.offer_help(help_request.id)
        assert help_request_service.get_help_request(help_request.id).resolved is False

    def test_missing_request(self, help_request_service):
        with pytest.raises(HelpRequestNotFoundError) as exc_info:
            help_request_service.offer_help(11)
        assert exc_info.value.details["request_id"] == 11
        assert exc_info.value.status_code == 404
